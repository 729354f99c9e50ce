"""Symbol inventory shared by the three notations.

Every row pairs a feature description with its symbol in IPA,
Kirschenbaum and X-SAMPA. ``None`` marks a notation that has no symbol
for that row; the encoder then falls back to a letter of the other
voicing plus a voicing mark, or to a place derivation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from phonetix.features.categories import (
    VOT,
    Manner,
    Mechanism,
    Nasalization,
    Phonation,
    Pitch,
    Place,
)
from phonetix.transcription.notation import Notation

Symbols = dict[Notation, str]


def _s(ipa: str | None, kirschenbaum: str | None, x_sampa: str | None) -> Symbols:
    pairs = (
        (Notation.IPA, ipa),
        (Notation.KIRSCHENBAUM, kirschenbaum),
        (Notation.X_SAMPA, x_sampa),
    )
    return {notation: text for notation, text in pairs if text is not None}


@dataclass(frozen=True)
class ConsonantLetter:
    manner: Manner
    place: Place
    voiced: bool
    symbols: Symbols = field(compare=False, hash=False)
    mechanism: Mechanism = Mechanism.PULMONIC_EGRESSIVE
    secondary: Place | None = None


@dataclass(frozen=True)
class VowelLetter:
    height: int
    backness: int
    rounded: bool
    symbols: Symbols = field(compare=False, hash=False)


class Mark(Enum):
    """Modifiers that attach to a letter."""

    # place
    LINGUOLABIAL = "linguolabial"
    DENTOLABIAL = "dentolabial"
    DENTAL = "dental"
    APICAL = "apical"
    LAMINAL = "laminal"
    RETROFLEXED = "retroflexed"
    ADVANCED = "advanced"
    RETRACTED = "retracted"
    RAISED = "raised"
    LOWERED = "lowered"
    # voicing and phonation
    DEVOICED = "devoiced"
    VOICED = "voiced"
    BREATHY = "breathy"
    SLACK = "slack"
    STIFF = "stiff"
    CREAKY = "creaky"
    GLOTTAL_CLOSURE = "glottal-closure"
    FAUCALIZED = "faucalized"
    HARSH = "harsh"
    STRIDENT = "strident"
    # airstream
    EJECTIVE = "ejective"
    # syllabicity
    SYLLABIC = "syllabic"
    NON_SYLLABIC = "non-syllabic"
    # nasalization
    NASALIZED = "nasalized"
    STRONGLY_NASALIZED = "strongly-nasalized"
    # secondary articulation
    LABIALIZED = "labialized"
    PALATALIZED = "palatalized"
    VELARIZED = "velarized"
    UVULARIZED = "uvularized"
    PHARYNGEALIZED = "pharyngealized"
    # voice onset time
    MODERATELY_VOICED = "moderately-voiced"
    WEAKLY_VOICED = "weakly-voiced"
    UNASPIRATED = "unaspirated"
    WEAKLY_ASPIRATED = "weakly-aspirated"
    ASPIRATED = "aspirated"
    STRONGLY_ASPIRATED = "strongly-aspirated"
    # vowel quality
    RHOTIC = "rhotic"
    ENDOLABIAL = "endolabial"
    # length
    EXTRA_SHORT = "extra-short"
    HALF_LONG = "half-long"
    LONG = "long"
    EXTRA_LONG = "extra-long"
    # joins two letters into one phone
    TIE = "tie"


def _c(
    manner: Manner,
    place: Place,
    voiced: bool,
    ipa: str | None,
    kirschenbaum: str | None,
    x_sampa: str | None,
    mechanism: Mechanism = Mechanism.PULMONIC_EGRESSIVE,
    secondary: Place | None = None,
) -> ConsonantLetter:
    return ConsonantLetter(
        manner, place, voiced, _s(ipa, kirschenbaum, x_sampa), mechanism, secondary
    )


def _v(
    height: int,
    backness: int,
    rounded: bool,
    ipa: str,
    kirschenbaum: str,
    x_sampa: str,
) -> VowelLetter:
    return VowelLetter(height, backness, rounded, _s(ipa, kirschenbaum, x_sampa))


_STOP = Manner.STOP
_NASAL = Manner.NASAL
_TRILL = Manner.TRILL
_FLAP = Manner.FLAP
_SIB = Manner.SIBILANT_FRICATIVE
_FRIC = Manner.NONSIBILANT_FRICATIVE
_APPROX = Manner.APPROXIMANT

P = Place
_IMPLOSIVE = Mechanism.IMPLOSIVE
_CLICK = Mechanism.CLICK

CONSONANT_LETTERS: tuple[ConsonantLetter, ...] = (
    # stops
    _c(_STOP, P.BILABIAL, False, "p", "p", "p"),
    _c(_STOP, P.BILABIAL, True, "b", "b", "b"),
    _c(_STOP, P.APICAL_ALVEOLAR, False, "t", "t", "t"),
    _c(_STOP, P.APICAL_ALVEOLAR, True, "d", "d", "d"),
    _c(_STOP, P.APICAL_RETROFLEX, False, "ʈ", "t.", "t`"),
    _c(_STOP, P.APICAL_RETROFLEX, True, "ɖ", "d.", "d`"),
    _c(_STOP, P.PALATAL, False, "c", "c", "c"),
    _c(_STOP, P.PALATAL, True, "ɟ", "J", "J\\"),
    _c(_STOP, P.VELAR, False, "k", "k", "k"),
    _c(_STOP, P.VELAR, True, "ɡ", "g", "g"),
    _c(_STOP, P.UVULAR, False, "q", "q", "q"),
    _c(_STOP, P.UVULAR, True, "ɢ", "G", "G\\"),
    _c(_STOP, P.EPIGLOTTAL, False, "ʡ", None, ">\\"),
    _c(_STOP, P.GLOTTAL, False, "ʔ", "?", "?"),
    # nasals
    _c(_NASAL, P.BILABIAL, True, "m", "m", "m"),
    _c(_NASAL, P.LABIODENTAL, True, "ɱ", "M", "F"),
    _c(_NASAL, P.APICAL_ALVEOLAR, True, "n", "n", "n"),
    _c(_NASAL, P.APICAL_RETROFLEX, True, "ɳ", "n.", "n`"),
    _c(_NASAL, P.PALATAL, True, "ɲ", "n^", "J"),
    _c(_NASAL, P.VELAR, True, "ŋ", "N", "N"),
    _c(_NASAL, P.UVULAR, True, "ɴ", 'n"', "N\\"),
    # trills and flaps
    _c(_TRILL, P.BILABIAL, True, "ʙ", "b<trl>", "B\\"),
    _c(_TRILL, P.APICAL_ALVEOLAR, True, "r", "r<trl>", "r"),
    _c(_TRILL, P.UVULAR, True, "ʀ", 'r"', "R\\"),
    _c(_FLAP, P.LABIODENTAL, True, "ⱱ", "*<lbd>", None),
    _c(_FLAP, P.APICAL_ALVEOLAR, True, "ɾ", "*", "4"),
    _c(_FLAP, P.APICAL_RETROFLEX, True, "ɽ", "*.", "r`"),
    _c(Manner.LATERAL_FLAP, P.APICAL_ALVEOLAR, True, "ɺ", "*<lat>", "l\\"),
    # sibilant fricatives
    _c(_SIB, P.APICAL_ALVEOLAR, False, "s", "s", "s"),
    _c(_SIB, P.APICAL_ALVEOLAR, True, "z", "z", "z"),
    _c(_SIB, P.LAMINAL_PALATO_ALVEOLAR, False, "ʃ", "S", "S"),
    _c(_SIB, P.LAMINAL_PALATO_ALVEOLAR, True, "ʒ", "Z", "Z"),
    _c(_SIB, P.APICAL_RETROFLEX, False, "ʂ", "s.", "s`"),
    _c(_SIB, P.APICAL_RETROFLEX, True, "ʐ", "z.", "z`"),
    _c(_SIB, P.ALVEOLO_PALATAL, False, "ɕ", "s^", "s\\"),
    _c(_SIB, P.ALVEOLO_PALATAL, True, "ʑ", "z^", "z\\"),
    # non-sibilant fricatives
    _c(_FRIC, P.BILABIAL, False, "ɸ", "P", "p\\"),
    _c(_FRIC, P.BILABIAL, True, "β", "B", "B"),
    _c(_FRIC, P.LABIODENTAL, False, "f", "f", "f"),
    _c(_FRIC, P.LABIODENTAL, True, "v", "v", "v"),
    _c(_FRIC, P.LAMINAL_DENTAL, False, "θ", "T", "T"),
    _c(_FRIC, P.LAMINAL_DENTAL, True, "ð", "D", "D"),
    _c(_FRIC, P.PALATAL, False, "ç", "C", "C"),
    _c(_FRIC, P.PALATAL, True, "ʝ", None, "j\\"),
    _c(_FRIC, P.VELAR, False, "x", "x", "x"),
    _c(_FRIC, P.VELAR, True, "ɣ", "Q", "G"),
    _c(_FRIC, P.UVULAR, False, "χ", "X", "X"),
    _c(_FRIC, P.UVULAR, True, "ʁ", 'g"', "R"),
    _c(_FRIC, P.PHARYNGEAL, False, "ħ", "H", "X\\"),
    _c(_FRIC, P.PHARYNGEAL, True, "ʕ", None, "?\\"),
    _c(_FRIC, P.EPIGLOTTAL, False, "ʜ", None, "H\\"),
    _c(_FRIC, P.EPIGLOTTAL, True, "ʢ", None, "<\\"),
    _c(_FRIC, P.GLOTTAL, False, "h", "h", "h"),
    _c(_FRIC, P.GLOTTAL, True, "ɦ", None, "h\\"),
    _c(Manner.LATERAL_FRICATIVE, P.APICAL_ALVEOLAR, False, "ɬ", "s<lat>", "K"),
    _c(Manner.LATERAL_FRICATIVE, P.APICAL_ALVEOLAR, True, "ɮ", "z<lat>", "K\\"),
    # approximants
    _c(_APPROX, P.LABIODENTAL, True, "ʋ", "r<lbd>", "v\\"),
    _c(_APPROX, P.APICAL_ALVEOLAR, True, "ɹ", "r", "r\\"),
    _c(_APPROX, P.APICAL_RETROFLEX, True, "ɻ", "r.", "r\\`"),
    _c(_APPROX, P.PALATAL, True, "j", "j", "j"),
    _c(_APPROX, P.VELAR, True, "ɰ", "j<vel>", "M\\"),
    _c(_APPROX, P.VELAR, True, "w", "w", "w", secondary=P.BILABIAL),
    _c(_APPROX, P.VELAR, False, "ʍ", None, "W", secondary=P.BILABIAL),
    _c(_APPROX, P.PALATAL, True, "ɥ", None, "H", secondary=P.BILABIAL),
    _c(Manner.LATERAL_APPROXIMANT, P.APICAL_ALVEOLAR, True, "l", "l", "l"),
    _c(Manner.LATERAL_APPROXIMANT, P.APICAL_RETROFLEX, True, "ɭ", "l.", "l`"),
    _c(Manner.LATERAL_APPROXIMANT, P.PALATAL, True, "ʎ", "l^", "L"),
    _c(Manner.LATERAL_APPROXIMANT, P.VELAR, True, "ʟ", "L", "L\\"),
    # implosives
    _c(_STOP, P.BILABIAL, True, "ɓ", "b<imp>", "b_<", _IMPLOSIVE),
    _c(_STOP, P.APICAL_ALVEOLAR, True, "ɗ", "d<imp>", "d_<", _IMPLOSIVE),
    _c(_STOP, P.PALATAL, True, "ʄ", "J<imp>", "J\\_<", _IMPLOSIVE),
    _c(_STOP, P.VELAR, True, "ɠ", "g<imp>", "g_<", _IMPLOSIVE),
    _c(_STOP, P.UVULAR, True, "ʛ", "G<imp>", "G\\_<", _IMPLOSIVE),
    # clicks
    _c(_STOP, P.BILABIAL, False, "ʘ", "p!", "O\\", _CLICK),
    _c(_STOP, P.LAMINAL_DENTAL, False, "ǀ", "T!", "|\\", _CLICK),
    _c(_STOP, P.APICAL_PALATO_ALVEOLAR, False, "ǃ", "S!", "!\\", _CLICK),
    _c(_STOP, P.PALATAL, False, "ǂ", "c!", "=\\", _CLICK),
)

VOWEL_LETTERS: tuple[VowelLetter, ...] = (
    _v(6, 0, False, "i", "i", "i"),
    _v(6, 0, True, "y", "y", "y"),
    _v(6, 2, False, "ɨ", 'i"', "1"),
    _v(6, 2, True, "ʉ", 'u"', "}"),
    _v(6, 4, False, "ɯ", "u-", "M"),
    _v(6, 4, True, "u", "u", "u"),
    _v(5, 1, False, "ɪ", "I", "I"),
    _v(5, 1, True, "ʏ", "I.", "Y"),
    _v(5, 3, True, "ʊ", "U", "U"),
    _v(4, 0, False, "e", "e", "e"),
    _v(4, 0, True, "ø", "Y", "2"),
    _v(4, 2, False, "ɘ", "@<umd>", "@\\"),
    _v(4, 2, True, "ɵ", "@.", "8"),
    _v(4, 4, False, "ɤ", "o-", "7"),
    _v(4, 4, True, "o", "o", "o"),
    _v(3, 2, False, "ə", "@", "@"),
    _v(2, 0, False, "ɛ", "E", "E"),
    _v(2, 0, True, "œ", "W", "9"),
    _v(2, 2, False, "ɜ", 'V"', "3"),
    _v(2, 2, True, "ɞ", 'O"', "3\\"),
    _v(2, 4, False, "ʌ", "V", "V"),
    _v(2, 4, True, "ɔ", "O", "O"),
    _v(1, 0, False, "æ", "&", "{"),
    _v(1, 2, False, "ɐ", '&"', "6"),
    _v(0, 0, False, "a", "a", "a"),
    _v(0, 0, True, "ɶ", "a.", "&"),
    _v(0, 4, False, "ɑ", "A", "A"),
    _v(0, 4, True, "ɒ", "A.", "Q"),
)

MARK_SYMBOLS: dict[Mark, Symbols] = {
    Mark.LINGUOLABIAL: _s("̼", "<lgl>", "_N"),
    Mark.DENTOLABIAL: _s("͆", "<dtl>", "_b"),
    Mark.DENTAL: _s("̪", "<dnt>", "_d"),
    Mark.APICAL: _s("̺", "<apc>", "_a"),
    Mark.LAMINAL: _s("̻", "<lmn>", "_m"),
    Mark.RETROFLEXED: _s("̢", "<rfx>", "_`"),
    Mark.ADVANCED: _s("̟", "<adv>", "_+"),
    Mark.RETRACTED: _s("̠", "<rtr>", "_-"),
    Mark.RAISED: _s("̝", "<rai>", "_r"),
    Mark.LOWERED: _s("̞", "<low>", "_o"),
    Mark.DEVOICED: _s("̥", "<vls>", "_0"),
    Mark.VOICED: _s("̬", "<vcd>", "_v"),
    Mark.BREATHY: _s("̤", "<?>", "_t"),
    Mark.SLACK: _s("̱", "<slk>", "_s"),
    Mark.STIFF: _s("͇", "<stf>", "_S"),
    Mark.CREAKY: _s("̰", "<crk>", "_k"),
    Mark.GLOTTAL_CLOSURE: _s("ˀ", "<gcl>", "_?"),
    Mark.FAUCALIZED: _s("͈", "<fcl>", "_f"),
    Mark.HARSH: _s("‼", "<hsh>", "_!"),
    Mark.STRIDENT: _s("͉", "<std>", "_z"),
    Mark.EJECTIVE: _s("ʼ", "`", "_>"),
    Mark.SYLLABIC: _s("̩", "-", "="),
    Mark.NON_SYLLABIC: _s("̯", "<nsy>", "_^"),
    Mark.NASALIZED: _s("̃", "~", "~"),
    Mark.STRONGLY_NASALIZED: _s("̃̃", "~~", "~~"),
    Mark.LABIALIZED: _s("ʷ", "<w>", "_w"),
    Mark.PALATALIZED: _s("ʲ", ";", "'"),
    Mark.VELARIZED: _s("ˠ", "<vlz>", "_G"),
    Mark.UVULARIZED: _s("ʶ", "<uvl>", "_q"),
    Mark.PHARYNGEALIZED: _s("ˤ", "<phr>", "_?\\"),
    Mark.MODERATELY_VOICED: _s("₍̥", "<mv>", "_V"),
    Mark.WEAKLY_VOICED: _s("₍̥₎", "<wv>", "_W"),
    Mark.UNASPIRATED: _s("˭", None, None),
    Mark.WEAKLY_ASPIRATED: _s("⁽ʰ⁾", "<wh>", "_h\\"),
    Mark.ASPIRATED: _s("ʰ", "<h>", "_h"),
    Mark.STRONGLY_ASPIRATED: _s("ʰʰ", "<hh>", "_h_h"),
    Mark.RHOTIC: _s("˞", "<r>", "`"),
    Mark.ENDOLABIAL: _s("ᵝ", "<end>", "_O"),
    Mark.EXTRA_SHORT: _s("̆", "<xs>", "_X"),
    Mark.HALF_LONG: _s("ˑ", "<hlf>", ":\\"),
    Mark.LONG: _s("ː", ":", ":"),
    Mark.EXTRA_LONG: _s("ːː", "::", "::"),
    Mark.TIE: _s("͡", "<tie>", ")"),
}

TONE_SYMBOLS: dict[Pitch, Symbols] = {
    Pitch.EXTRA_HIGH: _s("˥", "5", "_T"),
    Pitch.HIGH: _s("˦", "4", "_H"),
    Pitch.MID: _s("˧", "3", "_M"),
    Pitch.LOW: _s("˨", "2", "_L"),
    Pitch.EXTRA_LOW: _s("˩", "1", "_B"),
}

# Alternative spellings accepted when decoding, mapped to the canonical token.
VARIANTS: dict[Notation, dict[str, str]] = {
    Notation.IPA: {
        "g": "ɡ",
        "'": "ʼ",
        "̊": "̥",
        "̍": "̩",
        ":": "ː",
        "͜": "͡",
    },
    Notation.KIRSCHENBAUM: {},
    Notation.X_SAMPA: {
        "_~": "~",
        "_=": "=",
        "_j": "'",
    },
}

# Canonical emission order of modifier groups.
PLACE_MARKS: tuple[Mark, ...] = (
    Mark.LINGUOLABIAL,
    Mark.DENTOLABIAL,
    Mark.DENTAL,
    Mark.APICAL,
    Mark.LAMINAL,
    Mark.RETROFLEXED,
    Mark.ADVANCED,
    Mark.RETRACTED,
    Mark.RAISED,
    Mark.LOWERED,
)

VOWEL_OFFSETS: dict[Mark, tuple[int, int]] = {
    Mark.RAISED: (1, 0),
    Mark.LOWERED: (-1, 0),
    Mark.ADVANCED: (0, -1),
    Mark.RETRACTED: (0, 1),
}

VOICING_MARKS: dict[Mark, bool] = {
    Mark.DEVOICED: False,
    Mark.VOICED: True,
}

PHONATION_MARKS: dict[Mark, Phonation] = {
    Mark.BREATHY: Phonation.BREATHY,
    Mark.SLACK: Phonation.SLACK,
    Mark.STIFF: Phonation.STIFF,
    Mark.CREAKY: Phonation.CREAKY,
    Mark.GLOTTAL_CLOSURE: Phonation.GLOTTAL_CLOSURE,
    Mark.FAUCALIZED: Phonation.FAUCALIZED,
    Mark.HARSH: Phonation.HARSH,
    Mark.STRIDENT: Phonation.STRIDENT,
}

SYLLABICITY_MARKS: dict[Mark, bool] = {
    Mark.SYLLABIC: True,
    Mark.NON_SYLLABIC: False,
}

NASALIZATION_MARKS: dict[Mark, Nasalization] = {
    Mark.NASALIZED: Nasalization.NASAL,
    Mark.STRONGLY_NASALIZED: Nasalization.STRONGLY_NASAL,
}

SECONDARY_MARKS: dict[Mark, Place] = {
    Mark.LABIALIZED: Place.BILABIAL,
    Mark.PALATALIZED: Place.PALATAL,
    Mark.VELARIZED: Place.VELAR,
    Mark.UVULARIZED: Place.UVULAR,
    Mark.PHARYNGEALIZED: Place.PHARYNGEAL,
}

VOT_MARKS: dict[Mark, VOT] = {
    Mark.MODERATELY_VOICED: VOT.MODERATELY_VOICED,
    Mark.WEAKLY_VOICED: VOT.WEAKLY_VOICED,
    Mark.UNASPIRATED: VOT.NOT_ASPIRATED,
    Mark.WEAKLY_ASPIRATED: VOT.WEAKLY_ASPIRATED,
    Mark.ASPIRATED: VOT.MODERATELY_ASPIRATED,
    Mark.STRONGLY_ASPIRATED: VOT.STRONGLY_ASPIRATED,
}

LENGTH_MARKS: dict[Mark, float] = {
    Mark.EXTRA_SHORT: 0.5,
    Mark.HALF_LONG: 1.5,
    Mark.LONG: 2.0,
    Mark.EXTRA_LONG: 3.0,
}

_A = Mark.APICAL
_D = Mark.DENTAL
_DL = Mark.DENTOLABIAL
_LL = Mark.LINGUOLABIAL
_LM = Mark.LAMINAL
_RF = Mark.RETROFLEXED
_ADV = Mark.ADVANCED
_RTR = Mark.RETRACTED
_LOW = Mark.LOWERED


def _d(anchor: Place, *marks: Mark) -> tuple[Place, frozenset[Mark]]:
    return (anchor, frozenset(marks))


# Places reachable from a letter at an anchor place plus place marks,
# in order of preference for encoding.
PLACE_DERIVATIONS: dict[Place, tuple[tuple[Place, frozenset[Mark]], ...]] = {
    P.LABIODENTAL: (_d(P.BILABIAL, _D),),
    P.DENTOLABIAL: (_d(P.LABIODENTAL, _DL), _d(P.BILABIAL, _DL)),
    P.BIDENTAL: (_d(P.LABIODENTAL, _DL, _D), _d(P.BILABIAL, _DL, _D)),
    P.APICAL_LINGUOLABIAL: (_d(P.APICAL_ALVEOLAR, _LL),),
    P.LAMINAL_LINGUOLABIAL: (_d(P.APICAL_ALVEOLAR, _LL, _LM),),
    P.APICAL_LOWER_LIP: (_d(P.APICAL_ALVEOLAR, _LL, _LOW),),
    P.LAMINAL_LOWER_LIP: (_d(P.APICAL_ALVEOLAR, _LL, _LM, _LOW),),
    P.INTERDENTAL: (_d(P.LAMINAL_DENTAL, _ADV), _d(P.APICAL_ALVEOLAR, _D, _ADV)),
    P.APICAL_DENTAL: (_d(P.LAMINAL_DENTAL, _A), _d(P.APICAL_ALVEOLAR, _D, _A)),
    P.LAMINAL_DENTAL: (_d(P.APICAL_ALVEOLAR, _D),),
    P.APICAL_ALVEOLAR: (_d(P.LAMINAL_DENTAL, _RTR),),
    P.LAMINAL_ALVEOLAR: (
        _d(P.APICAL_ALVEOLAR, _LM),
        _d(P.LAMINAL_DENTAL, _RTR, _LM),
    ),
    P.APICAL_PALATO_ALVEOLAR: (
        _d(P.LAMINAL_PALATO_ALVEOLAR, _A),
        _d(P.APICAL_ALVEOLAR, _RTR),
    ),
    P.LAMINAL_PALATO_ALVEOLAR: (_d(P.APICAL_ALVEOLAR, _RTR, _LM),),
    P.APICAL_RETROFLEX: (_d(P.APICAL_ALVEOLAR, _RF),),
    P.LAMINAL_RETROFLEX: (
        _d(P.APICAL_RETROFLEX, _LM),
        _d(P.APICAL_ALVEOLAR, _RF, _LM),
    ),
    P.SUBAPICAL_RETROFLEX: (
        _d(P.APICAL_RETROFLEX, _RTR),
        _d(P.APICAL_ALVEOLAR, _RF, _RTR),
    ),
    P.ALVEOLO_PALATAL: (_d(P.PALATAL, _ADV),),
    P.PALATAL: (_d(P.VELAR, _ADV),),
    P.VELAR: (_d(P.UVULAR, _ADV), _d(P.PALATAL, _RTR)),
    P.UVULAR: (_d(P.VELAR, _RTR),),
    P.PHARYNGEAL: (_d(P.UVULAR, _RTR),),
    P.EPIGLOTTAL: (_d(P.PHARYNGEAL, _RTR),),
}

# Redundant marks accepted when decoding; never emitted.
PLACE_REDUNDANCIES: dict[tuple[Place, frozenset[Mark]], Place] = {
    _d(P.APICAL_ALVEOLAR, _A): P.APICAL_ALVEOLAR,
    _d(P.LAMINAL_DENTAL, _LM): P.LAMINAL_DENTAL,
    _d(P.LAMINAL_PALATO_ALVEOLAR, _LM): P.LAMINAL_PALATO_ALVEOLAR,
    _d(P.APICAL_RETROFLEX, _A): P.APICAL_RETROFLEX,
}


def derived_places() -> dict[tuple[Place, frozenset[Mark]], Place]:
    """Reverse of :data:`PLACE_DERIVATIONS`: (anchor, marks) to place.

    Raises:
        ValueError: If two places share an (anchor, marks) pair.
    """
    reverse: dict[tuple[Place, frozenset[Mark]], Place] = {}
    for place, derivations in PLACE_DERIVATIONS.items():
        for key in derivations:
            if key in reverse:
                raise ValueError(
                    f"{key[0].name} + {sorted(m.value for m in key[1])} derives "
                    f"both {reverse[key].name} and {place.name}"
                )
            reverse[key] = place
    for key, place in PLACE_REDUNDANCIES.items():
        reverse.setdefault(key, place)
    return reverse
