"""Transcription text to :class:`~phonetix.features.syllable.Syllable`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from phonetix.errors import DecodingFailed, ImpossibleArticulation, InvalidFeatureValue
from phonetix.features.categories import (
    VOT,
    Manner,
    Mechanism,
    Nasalization,
    Phonation,
    Roundedness,
)
from phonetix.features.phones import Consonant, Phone, Vowel
from phonetix.features.syllable import Syllable
from phonetix.features.tone import Tone
from phonetix.transcription.notation import Notation
from phonetix.transcription.symbols import (
    LENGTH_MARKS,
    NASALIZATION_MARKS,
    PHONATION_MARKS,
    PLACE_MARKS,
    SECONDARY_MARKS,
    SYLLABICITY_MARKS,
    VOICING_MARKS,
    VOT_MARKS,
    VOWEL_OFFSETS,
    Mark,
    derived_places,
)
from phonetix.transcription.table import SymbolTable, Token, TokenKind, symbol_table

logger = logging.getLogger(__name__)

_ENCLOSURES = {"(": ")", "{": "}", "/": "/", "<": ">", "⟨": "⟩"}

_GROUPS: dict[Mark, str] = {
    **{m: "place" for m in PLACE_MARKS},
    **{m: "voicing" for m in VOICING_MARKS},
    **{m: "phonation" for m in PHONATION_MARKS},
    Mark.EJECTIVE: "airstream",
    **{m: "syllabicity" for m in SYLLABICITY_MARKS},
    **{m: "nasalization" for m in NASALIZATION_MARKS},
    **{m: "secondary articulation" for m in SECONDARY_MARKS},
    **{m: "voice onset time" for m in VOT_MARKS},
    Mark.RHOTIC: "rhoticity",
    Mark.ENDOLABIAL: "rounding",
    **{m: "length" for m in LENGTH_MARKS},
}

_DERIVED = derived_places()


@dataclass
class _Unit:
    """Tokens that make up one phone."""

    letter: Token
    tie: Token | None = None
    tied: Token | None = None
    marks: list[Token] = field(default_factory=list)

    @property
    def awaiting_tie(self) -> bool:
        return self.tie is not None and self.tied is None

    @property
    def text(self) -> str:
        tokens = [self.letter, self.tie, self.tied, *self.marks]
        tokens = [t for t in tokens if t is not None]
        return "".join(t.text for t in sorted(tokens, key=lambda t: t.position))


class _Marks:
    """A unit's marks sorted into groups; at most one mark per group.

    Place marks are kept as a list because vowels may stack them.
    """

    def __init__(self, unit: _Unit) -> None:
        self.place: list[Token] = []
        self._single: dict[str, Token] = {}
        for token in unit.marks:
            group = _GROUPS[token.value]
            if group == "place":
                self.place.append(token)
                continue
            if group in self._single:
                first = self._single[group]
                raise DecodingFailed(
                    f"Conflicting {group} marks {first.text!r} and {token.text!r} "
                    f"at position {token.position}",
                    position=token.position,
                )
            self._single[group] = token

    def get(self, group: str) -> Mark | None:
        token = self._single.get(group)
        return token.value if token else None

    def reject(
        self, groups: tuple[str, ...], kind: str, only: tuple[Mark, ...] = ()
    ) -> None:
        """Fail on any mark of ``groups``, or only on the marks in ``only``."""
        for group in groups:
            token = self._single.get(group)
            if token is not None and (not only or token.value in only):
                raise DecodingFailed(
                    f"Mark {token.text!r} at position {token.position} "
                    f"cannot modify a {kind}",
                    position=token.position,
                )


def decode(text: str, notation: Any = Notation.X_SAMPA) -> Syllable:
    """Decode a one-syllable transcription.

    Args:
        text: Transcription, optionally enclosed in square brackets.
        notation: Notation of ``text``; X-SAMPA by default.

    Returns:
        The syllable the transcription describes.

    Raises:
        DecodingFailed: If ``text`` is not a well-formed transcription of
            one articulable syllable.
    """
    notation = Notation.coerce(notation)
    if not isinstance(text, str):
        raise DecodingFailed(f"Expected a string, got {type(text).__name__}")
    table = symbol_table(notation)
    body, offset = _strip_brackets(text, table)
    tokens = table.tokenize(body, offset)
    tone, tokens = _split_tone(tokens)

    phones: list[Phone] = []
    syllabic: list[bool] = []
    for unit in _group(tokens):
        phone, flag = _build(unit)
        phones.append(phone)
        syllabic.append(isinstance(phone, Vowel) if flag is None else flag)

    syllable = _segment(phones, syllabic, tone)
    logger.debug("Decoded %s %r into %r", notation.value, text, syllable)
    return syllable


def _strip_brackets(text: str, table: SymbolTable) -> tuple[str, int]:
    """Remove whitespace and one optional pair of square brackets."""
    offset = len(text) - len(text.lstrip())
    body = text.strip()
    if not body:
        raise DecodingFailed("Empty transcription")
    if body.startswith("["):
        if len(body) < 2 or not body.endswith("]"):
            raise DecodingFailed("Unmatched '[' in transcription", position=offset)
        body = body[1:-1]
        offset += 1
    elif body.endswith("]"):
        raise DecodingFailed("Unmatched ']' in transcription")
    elif body[0] in _ENCLOSURES and not table.starts_symbol(body[0]):
        raise DecodingFailed(
            f"Unsupported enclosure {body[0]}...{_ENCLOSURES[body[0]]}; "
            "use square brackets",
            position=offset,
        )
    for bracket in "[]":
        if bracket in body:
            position = offset + body.index(bracket)
            raise DecodingFailed(
                f"Unexpected {bracket!r} at position {position}", position=position
            )
    if not body:
        raise DecodingFailed("Empty transcription")
    return body, offset


def _split_tone(tokens: list[Token]) -> tuple[Tone, list[Token]]:
    """Separate the leading or trailing tone marks from the phones."""
    is_tone = [t.kind is TokenKind.TONE for t in tokens]
    if all(is_tone):
        raise DecodingFailed("Transcription contains no phones")
    lead = is_tone.index(False)
    trail = is_tone[::-1].index(False)
    for token in tokens[lead:len(tokens) - trail]:
        if token.kind is TokenKind.TONE:
            raise DecodingFailed(
                f"Tone mark {token.text!r} at position {token.position} "
                "must come before or after all phones",
                position=token.position,
            )
    if lead and trail:
        raise DecodingFailed("Tone marks found both before and after the phones")

    marks = tokens[:lead] if lead else tokens[len(tokens) - trail:]
    phones = tokens[lead:len(tokens) - trail]
    pitches = [t.value for t in marks]
    if not pitches:
        return Tone(), phones
    if len(pitches) == 1:
        return Tone(*pitches * Tone.SLOTS), phones
    if len(pitches) == Tone.SLOTS:
        return Tone(*pitches), phones
    raise DecodingFailed(
        f"Expected 1 or {Tone.SLOTS} tone marks, found {len(pitches)}",
        position=marks[0].position,
    )


def _group(tokens: list[Token]) -> list[_Unit]:
    units: list[_Unit] = []
    for token in tokens:
        current = units[-1] if units else None
        if token.kind in (TokenKind.CONSONANT, TokenKind.VOWEL):
            if current is not None and current.awaiting_tie:
                if token.kind is not TokenKind.CONSONANT:
                    raise DecodingFailed(
                        f"Tie bar must join two consonant letters "
                        f"(position {token.position})",
                        position=token.position,
                    )
                current.tied = token
            else:
                units.append(_Unit(token))
            continue
        if current is None:
            raise DecodingFailed(
                f"Mark {token.text!r} at position {token.position} has no letter "
                "to modify",
                position=token.position,
            )
        if current.awaiting_tie:
            raise DecodingFailed(
                f"Expected a letter after the tie bar at position {token.position}",
                position=token.position,
            )
        if token.value is Mark.TIE:
            if (
                current.letter.kind is not TokenKind.CONSONANT
                or current.tie is not None
                or current.marks
            ):
                raise DecodingFailed(
                    f"Tie bar at position {token.position} must directly follow "
                    "a consonant letter",
                    position=token.position,
                )
            current.tie = token
            continue
        current.marks.append(token)
    if units and units[-1].awaiting_tie:
        raise DecodingFailed("Transcription ends with a tie bar")
    return units


def _build(unit: _Unit) -> tuple[Phone, bool | None]:
    """Build a phone and report its syllabicity mark, if any."""
    builder = _build_consonant if unit.letter.kind is TokenKind.CONSONANT else _build_vowel
    marks = _Marks(unit)
    try:
        phone = builder(unit, marks)
    except (ImpossibleArticulation, InvalidFeatureValue) as exc:
        raise DecodingFailed(
            f"{unit.text!r} at position {unit.letter.position}: {exc.message}",
            position=unit.letter.position,
        ) from exc
    flag = marks.get("syllabicity")
    return phone, None if flag is None else SYLLABICITY_MARKS[flag]


def _build_consonant(unit: _Unit, marks: _Marks) -> Consonant:
    letter = unit.letter.value
    marks.reject(("rhoticity", "rounding"), "consonant")

    secondary = letter.secondary
    release = release_place = None
    if unit.tied is not None:
        other = unit.tied.value
        if other.secondary is not None:
            raise DecodingFailed(
                f"{unit.text!r}: a tied letter cannot carry its own secondary "
                "articulation",
                position=unit.tied.position,
            )
        if other.manner is letter.manner:
            if secondary is not None:
                raise DecodingFailed(
                    f"{unit.text!r}: a phone has at most one secondary articulation",
                    position=unit.letter.position,
                )
            secondary = other.place
        elif letter.manner is Manner.STOP and other.manner.is_fricative:
            # A release at the stop letter's own place follows any place marks.
            release = other.manner
            if other.place is not letter.place:
                release_place = other.place
        else:
            raise DecodingFailed(
                f"{unit.text!r}: a {letter.manner.label} tied to a "
                f"{other.manner.label} is neither a double articulation nor "
                "an affricate",
                position=unit.letter.position,
            )

    place = letter.place
    if marks.place:
        names = [t.value for t in marks.place]
        if len(set(names)) != len(names):
            raise DecodingFailed(
                f"{unit.text!r}: repeated place mark", position=unit.letter.position
            )
        derived = _DERIVED.get((letter.place, frozenset(names)))
        if derived is None:
            raise DecodingFailed(
                f"{unit.text!r}: place marks do not apply to a "
                f"{letter.place.label} letter",
                position=unit.letter.position,
            )
        place = derived

    voicing = marks.get("voicing")
    voiced = letter.voiced if voicing is None else VOICING_MARKS[voicing]
    phonation_mark = marks.get("phonation")
    if phonation_mark is not None:
        phonation = PHONATION_MARKS[phonation_mark]
    else:
        phonation = Phonation.MODAL if voiced else Phonation.VOICELESS

    mechanism = letter.mechanism
    if marks.get("airstream") is Mark.EJECTIVE:
        if mechanism is not Mechanism.PULMONIC_EGRESSIVE:
            raise DecodingFailed(
                f"{unit.text!r}: an {mechanism.label} letter cannot be ejective",
                position=unit.letter.position,
            )
        mechanism = Mechanism.EJECTIVE

    secondary_mark = marks.get("secondary articulation")
    if secondary_mark is not None:
        if secondary is not None:
            raise DecodingFailed(
                f"{unit.text!r}: a phone has at most one secondary articulation",
                position=unit.letter.position,
            )
        secondary = SECONDARY_MARKS[secondary_mark]

    vot_mark = marks.get("voice onset time")
    if vot_mark is not None:
        vot = VOT_MARKS[vot_mark]
    else:
        vot = VOT.COMPLETELY_VOICED if phonation.is_voiced else VOT.NOT_ASPIRATED

    nasal = marks.get("nasalization")
    length = marks.get("length")
    return Consonant(
        manner=letter.manner,
        place=place,
        phonation=phonation,
        vot=vot,
        nasalization=Nasalization.ORAL if nasal is None else NASALIZATION_MARKS[nasal],
        mechanism=mechanism,
        length=1.0 if length is None else LENGTH_MARKS[length],
        secondary_articulation=secondary,
        release=release,
        release_place=release_place,
    )


def _build_vowel(unit: _Unit, marks: _Marks) -> Vowel:
    letter = unit.letter.value
    marks.reject(("airstream", "secondary articulation", "voice onset time"), "vowel")
    marks.reject(("voicing",), "vowel", only=(Mark.VOICED,))

    height, backness = letter.height, letter.backness
    for token in marks.place:
        offset = VOWEL_OFFSETS.get(token.value)
        if offset is None:
            raise DecodingFailed(
                f"Mark {token.text!r} at position {token.position} cannot modify "
                "a vowel",
                position=token.position,
            )
        height += offset[0]
        backness += offset[1]

    if marks.get("rounding") is Mark.ENDOLABIAL:
        if not letter.rounded:
            raise DecodingFailed(
                f"{unit.text!r}: endolabial rounding needs a rounded vowel letter",
                position=unit.letter.position,
            )
        roundedness = Roundedness.ENDOLABIAL
    else:
        roundedness = Roundedness.EXOLABIAL if letter.rounded else Roundedness.UNROUNDED

    phonation_mark = marks.get("phonation")
    if phonation_mark is not None:
        phonation = PHONATION_MARKS[phonation_mark]
    elif marks.get("voicing") is Mark.DEVOICED:
        phonation = Phonation.VOICELESS
    else:
        phonation = Phonation.MODAL

    nasal = marks.get("nasalization")
    length = marks.get("length")
    return Vowel(
        height=height,
        backness=backness,
        roundedness=roundedness,
        nasalization=Nasalization.ORAL if nasal is None else NASALIZATION_MARKS[nasal],
        r_colored=marks.get("rhoticity") is Mark.RHOTIC,
        phonation=phonation,
        length=1.0 if length is None else LENGTH_MARKS[length],
    )


def _segment(phones: list[Phone], syllabic: list[bool], tone: Tone) -> Syllable:
    peaks = [i for i, flag in enumerate(syllabic) if flag]
    if not peaks:
        raise DecodingFailed("No vowel or syllabic consonant to form a nucleus")
    first, last = peaks[0], peaks[-1]
    if last - first + 1 != len(peaks):
        raise DecodingFailed(
            "Transcription holds more than one syllable nucleus; "
            "only single syllables can be decoded"
        )
    return Syllable(
        onset=phones[:first],
        nucleus=phones[first:last + 1],
        coda=phones[last + 1:],
        tone=tone,
    )
