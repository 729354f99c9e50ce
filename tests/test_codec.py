"""Tests for decoding and encoding syllable transcriptions."""

import pytest

from phonetix import convert
from phonetix.errors import (
    DecodingFailed,
    EncodingFailed,
    ImpossibleArticulation,
    InvalidFeatureValue,
    PhoneticValueError,
)
from phonetix.features import (
    VOT,
    Consonant,
    Manner,
    Mechanism,
    Nasalization,
    Phonation,
    Place,
    Roundedness,
    Syllable,
    Tone,
    Vowel,
)
from phonetix.transcription import Notation, decode, encode
from phonetix.transcription.symbols import CONSONANT_LETTERS, VOWEL_LETTERS

NOTATIONS = list(Notation)

# Letters some notations cannot spell, even with marks.
UNSPELLABLE = {
    ("ʡ", Notation.KIRSCHENBAUM),
    ("ⱱ", Notation.X_SAMPA),
}


P = Place

# Manner and place cells the validator accepts but IPA cannot spell.
IPA_GAPS = {
    Manner.TRILL: {P.ALVEOLO_PALATAL, P.PALATAL, P.EPIGLOTTAL},
    Manner.FLAP: {
        P.BILABIAL, P.ALVEOLO_PALATAL, P.PALATAL, P.UVULAR, P.PHARYNGEAL,
        P.EPIGLOTTAL,
    },
    Manner.LATERAL_FLAP: {P.ALVEOLO_PALATAL, P.PALATAL, P.VELAR, P.UVULAR},
    Manner.LATERAL_FRICATIVE: {P.ALVEOLO_PALATAL, P.PALATAL, P.VELAR, P.UVULAR},
    Manner.APPROXIMANT: {P.BILABIAL, P.PHARYNGEAL, P.EPIGLOTTAL, P.GLOTTAL},
    Manner.SIBILANT_FRICATIVE: {
        P.BILABIAL, P.LABIODENTAL, P.DENTOLABIAL, P.BIDENTAL, P.PALATAL,
        P.VELAR, P.UVULAR, P.PHARYNGEAL, P.EPIGLOTTAL, P.GLOTTAL,
    },
    Manner.NONSIBILANT_FRICATIVE: {
        P.APICAL_LINGUOLABIAL, P.LAMINAL_LINGUOLABIAL, P.APICAL_LOWER_LIP,
        P.LAMINAL_LOWER_LIP, P.APICAL_PALATO_ALVEOLAR,
        P.LAMINAL_PALATO_ALVEOLAR, P.APICAL_RETROFLEX, P.LAMINAL_RETROFLEX,
        P.SUBAPICAL_RETROFLEX,
    },
}


def _has_spelling(manner, place, notation):
    if place in IPA_GAPS.get(manner, ()):
        return False
    if notation is Notation.KIRSCHENBAUM:
        return (manner, place) != (Manner.STOP, P.EPIGLOTTAL)
    if notation is Notation.X_SAMPA:
        return not (
            manner is Manner.FLAP
            and place in (P.LABIODENTAL, P.DENTOLABIAL, P.BIDENTAL)
        )
    return True


def _plain_consonant(manner, place, phonation):
    """A pulmonic consonant with default marks, or None if unpronounceable."""
    vot = VOT.COMPLETELY_VOICED if phonation.is_voiced else VOT.NOT_ASPIRATED
    try:
        return Consonant(manner=manner, place=place, phonation=phonation, vot=vot)
    except ImpossibleArticulation:
        return None


def _round_trip(syllable, notation):
    return decode(encode(syllable, notation), notation)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecode:
    def test_aspirated_stop(self):
        syllable = decode("[t_ha]")
        (onset,) = syllable.onset
        assert onset.place is Place.APICAL_ALVEOLAR
        assert onset.phonation is Phonation.VOICELESS
        assert onset.vot is VOT.MODERATELY_ASPIRATED
        assert syllable.nucleus == (Vowel(height=0, backness=0),)

    def test_plain_stop_is_unaspirated(self, plain_t):
        assert decode("[ta]").onset == (plain_t,)

    def test_brackets_and_whitespace_are_optional(self):
        assert decode("  [ta] ") == decode("ta")

    def test_default_notation_is_x_sampa(self):
        assert decode("[@]") == decode("[@]", Notation.X_SAMPA) == Syllable()

    def test_notation_names(self):
        assert decode("[ə]", "unicode") == decode("[@]", "xsampa")
        assert decode("[@]", "ascii-ipa") == Syllable()

    def test_unknown_notation(self):
        with pytest.raises(PhoneticValueError):
            decode("[a]", "sampa")

    def test_voicing_mark(self):
        (onset,) = decode("[C_va]").onset
        assert onset.phonation is Phonation.MODAL
        assert onset.vot is VOT.COMPLETELY_VOICED
        assert onset.place is Place.PALATAL

    def test_phonation_mark(self):
        (onset,) = decode("[d_ta]").onset
        assert onset.phonation is Phonation.BREATHY

    def test_place_mark(self):
        (onset,) = decode("[t_dA]").onset
        assert onset.place is Place.LAMINAL_DENTAL

    def test_derived_place_from_two_marks(self):
        (onset,) = decode("[t_N_ma]").onset
        assert onset.place is Place.LAMINAL_LINGUOLABIAL

    def test_secondary_from_letter(self):
        (onset,) = decode("[wa]").onset
        assert onset.place is Place.VELAR
        assert onset.secondary_articulation is Place.BILABIAL

    def test_secondary_from_mark(self):
        (onset,) = decode("[l_Ga]").onset
        assert onset.secondary_articulation is Place.VELAR

    def test_tied_letters(self):
        (onset,) = decode("[k)pa]").onset
        assert onset.place is Place.VELAR
        assert onset.secondary_articulation is Place.BILABIAL

    def test_ejective(self):
        (onset,) = decode("[p_>a]").onset
        assert onset.mechanism is Mechanism.EJECTIVE

    def test_implosive(self):
        (onset,) = decode("[b_<a]").onset
        assert onset.mechanism is Mechanism.IMPLOSIVE
        assert onset.phonation is Phonation.MODAL

    def test_click(self):
        (onset,) = decode("[|\\a]").onset
        assert onset.mechanism is Mechanism.CLICK
        assert onset.place is Place.LAMINAL_DENTAL

    def test_vowel_offsets_stack(self):
        (vowel,) = decode("[a_r_r_-]").nucleus
        assert (vowel.height, vowel.backness) == (2.0, 1.0)

    def test_vowel_marks(self):
        (vowel,) = decode("[u_O_0~`::]").nucleus
        assert vowel.roundedness is Roundedness.ENDOLABIAL
        assert vowel.phonation is Phonation.VOICELESS
        assert vowel.nasalization is Nasalization.NASAL
        assert vowel.is_r_colored()
        assert vowel.length == 3.0

    def test_creaky_vowel(self):
        (vowel,) = decode("[a_k]").nucleus
        assert vowel.phonation is Phonation.CREAKY

    def test_syllabic_consonant(self):
        syllable = decode("[n=]")
        assert syllable.nucleus[0].manner is Manner.NASAL
        assert syllable.onset == syllable.coda == ()

    def test_non_syllabic_vowels(self):
        falling = decode("[ai_^]")
        assert len(falling.nucleus) == 1
        assert falling.coda[0].height == 6.0
        rising = decode("[i_^a]")
        assert rising.onset[0].height == 6.0

    def test_long_nucleus(self):
        syllable = decode("[n=a]")
        assert len(syllable.nucleus) == 2

    def test_variants(self):
        assert decode("[ga]", "ipa") == decode("[ɡa]", "ipa")
        assert decode("[a:]", "ipa") == decode("[aː]", "ipa")
        assert decode("[a_~]") == decode("[a~]")
        assert decode("[t_ja]") == decode("[t'a]")

    def test_unaspirated_mark(self):
        assert decode("[t˭a]", "ipa") == decode("[ta]", "ipa")

    def test_kirschenbaum(self):
        syllable = decode("[t<h>a~]", "kirschenbaum")
        assert syllable == decode("[t_ha~]")


class TestDecodeTone:
    def test_level_tone(self):
        assert decode("[a_H]").tone == Tone(1, 1, 1)

    def test_contour(self):
        assert decode("[ma_T_M_B]").tone == Tone(2, 0, -2)

    def test_leading_tone(self):
        assert decode("[_La]").tone == Tone(-1, -1, -1)

    def test_no_tone_is_mid(self):
        assert decode("[a]").tone == Tone()

    @pytest.mark.parametrize(
        "text",
        ["[_H]", "[a_H_H]", "[a_H_H_H_H]", "[_Ha_H]", "[t_Ha]"],
    )
    def test_malformed_tone(self, text):
        with pytest.raises(DecodingFailed):
            decode(text)


class TestDecodeErrors:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "[]",
            "[a",
            "a]",
            "[a]]",
            "[st]",
            "[ata]",
            "[_ha]",
            "[at)]",
            "[a)t]",
            "[t)a]",
            "[a_h]",
            "[ap`]",
            "[a_0_v]",
            "[t_d_da]",
            "[p_ra]",
            "[b_<_>a]",
            "[i_O]",
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(DecodingFailed):
            decode(text)

    @pytest.mark.parametrize(
        "notation, text",
        [
            ("ipa", "[stk]"),
            ("kirschenbaum", "[stk]"),
            ("x-sampa", "[stk]"),
            ("ipa", "[ʃm]"),
        ],
    )
    def test_consonants_only(self, notation, text):
        with pytest.raises(DecodingFailed, match="nucleus"):
            decode(text, notation)

    def test_other_enclosures(self):
        with pytest.raises(DecodingFailed, match="square brackets"):
            decode("/a/", "ipa")

    @pytest.mark.parametrize(
        "notation, text, shown",
        [
            ("ipa", "[t͡ma]", "'t͡m'"),
            ("x-sampa", "[t)ma]", "'t)m'"),
            ("kirschenbaum", "[s<tie>ta]", "'s<tie>t'"),
        ],
    )
    def test_untieable_pair_quotes_input(self, notation, text, shown):
        with pytest.raises(DecodingFailed, match="neither a double articulation") as info:
            decode(text, notation)
        assert shown in str(info.value)

    def test_tied_letter_with_its_own_secondary(self):
        with pytest.raises(DecodingFailed):
            decode("[w)wa]")

    @pytest.mark.parametrize(
        "notation, text",
        [("x-sampa", "[a_v]"), ("ipa", "[a̬]"), ("kirschenbaum", "[a<vcd>]")],
    )
    def test_voiced_mark_on_vowel(self, notation, text):
        with pytest.raises(DecodingFailed, match="cannot modify a vowel"):
            decode(text, notation)

    def test_devoiced_mark_on_vowel_is_accepted(self):
        (vowel,) = decode("[a_0]").nucleus
        assert vowel.phonation is Phonation.VOICELESS

    def test_unknown_symbol_position(self):
        with pytest.raises(DecodingFailed) as info:
            decode("[ta§]", "ipa")
        assert info.value.position == 3

    def test_impossible_articulation_is_chained(self):
        with pytest.raises(DecodingFailed) as info:
            decode("[?_va]")
        assert isinstance(info.value.__cause__, ImpossibleArticulation)
        assert info.value.position == 1

    def test_out_of_range_vowel_is_chained(self):
        with pytest.raises(DecodingFailed) as info:
            decode("[i_r]")
        assert isinstance(info.value.__cause__, InvalidFeatureValue)

    def test_non_string(self):
        with pytest.raises(DecodingFailed):
            decode(None)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode("[st]")


# ---------------------------------------------------------------------------
# Affricates
# ---------------------------------------------------------------------------


T_ESH = Consonant(
    vot=VOT.NOT_ASPIRATED,
    release=Manner.SIBILANT_FRICATIVE,
    release_place=Place.LAMINAL_PALATO_ALVEOLAR,
)

SPELLINGS = [
    ("ipa", "[t͡ʃa]"),
    ("x-sampa", "[t)Sa]"),
    ("kirschenbaum", "[t<tie>Sa]"),
]


class TestAffricates:
    @pytest.mark.parametrize("notation, text", SPELLINGS)
    def test_decodes_to_one_phone(self, notation, text):
        syllable = decode(text, notation)
        assert syllable.onset == (T_ESH,)
        assert syllable.nucleus == (Vowel(height=0, backness=0),)

    @pytest.mark.parametrize("notation, text", SPELLINGS)
    def test_encodes_to_tied_spelling(self, notation, text):
        syllable = Syllable(onset=[T_ESH], nucleus=[Vowel(height=0, backness=0)])
        assert encode(syllable, notation) == text

    def test_convert_between_notations(self):
        assert convert("[t͡ʃa]", "ipa", "x-sampa") == "[t)Sa]"
        assert convert("[t<tie>Sa]", "kirschenbaum", "ipa") == "[t͡ʃa]"

    def test_homorganic(self):
        (onset,) = decode("[t)sa]").onset
        assert onset.release is Manner.SIBILANT_FRICATIVE
        assert onset.features().release_place is None
        assert onset.release_place is Place.APICAL_ALVEOLAR

    def test_homorganic_release_takes_place_marks(self):
        (onset,) = decode("[t)s_da]").onset
        assert onset.place is Place.LAMINAL_DENTAL
        assert onset.release_place is Place.LAMINAL_DENTAL
        assert encode(Syllable(onset=[onset]), "x-sampa") == "[t)s_d@]"

    def test_voicing_comes_from_the_stop(self):
        (onset,) = decode("[d͡ʒa]", "ipa").onset
        assert onset.phonation is Phonation.MODAL
        assert onset.vot is VOT.COMPLETELY_VOICED
        assert onset.release_place is Place.LAMINAL_PALATO_ALVEOLAR

    def test_labiodental_release(self):
        (onset,) = decode("[p͡fa]", "ipa").onset
        assert onset.place is Place.BILABIAL
        assert onset.release is Manner.NONSIBILANT_FRICATIVE
        assert onset.release_place is Place.LABIODENTAL

    def test_lateral_release(self):
        (onset,) = decode("[t͡ɬa]", "ipa").onset
        assert onset.release is Manner.LATERAL_FRICATIVE

    def test_marks_follow_the_pair(self):
        assert convert("[t)S_>_ha:]", "x-sampa", "ipa") == "[t͡ʃʼʰaː]"
        assert convert("[t͡sʷa]", "ipa", "x-sampa") == "[t)s_wa]"

    def test_describe(self):
        (onset,) = decode("[t)Sa]").onset
        assert onset.description() == (
            "voiceless apical alveolar stop "
            "with laminal palato-alveolar sibilant fricative release"
        )

    def test_fricative_first_is_rejected(self):
        with pytest.raises(DecodingFailed):
            decode("[S)ta]")

    def test_marks_before_the_tie_are_rejected(self):
        with pytest.raises(DecodingFailed):
            decode("[t_h)Sa]")

    def test_missing_release_letter(self):
        stop = Consonant(
            vot=VOT.NOT_ASPIRATED,
            release=Manner.NONSIBILANT_FRICATIVE,
            release_place=Place.APICAL_RETROFLEX,
        )
        with pytest.raises(EncodingFailed, match="release"):
            encode(Syllable(onset=[stop]))

    def test_tied_secondary_articulation_on_affricate(self):
        stop = Consonant(
            vot=VOT.NOT_ASPIRATED,
            release=Manner.SIBILANT_FRICATIVE,
            secondary_articulation=Place.LABIODENTAL,
        )
        with pytest.raises(EncodingFailed, match="tie bar"):
            encode(Syllable(onset=[stop]))


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestEncode:
    def test_default_syllable(self):
        assert encode(Syllable()) == "[ə]"
        assert encode(Syllable(), Notation.X_SAMPA) == "[@]"
        assert encode(Syllable(), "kirschenbaum") == "[@]"

    def test_rich_syllable(self, rich_syllable):
        assert encode(rich_syllable) == "[kʷʰʰɐ̠̃ːn˥˧˩]"

    def test_canonical_mark_order(self):
        assert convert("[tʰ̪a]", "ipa", "ipa") == "[t̪ʰa]"

    def test_aspiration(self):
        assert convert("t_ha", "x-sampa", "ipa") == "[tʰa]"

    def test_tie_is_normalized_to_mark(self):
        assert convert("[k͡pa]", "ipa", "ipa") == "[kʷa]"

    def test_preferred_letter_over_voicing_mark(self):
        assert convert("[C_va]", "x-sampa", "ipa") == "[ʝa]"

    def test_missing_letter_uses_voicing_mark(self):
        assert convert("[j\\a]", "x-sampa", "kirschenbaum") == "[C<vcd>a]"

    def test_missing_letter_uses_place_mark(self):
        assert convert("[H\\a]", "x-sampa", "kirschenbaum") == "[H<rtr>a]"

    def test_secondary_without_mark_uses_tie(self):
        nasal = Consonant(
            manner=Manner.NASAL,
            phonation=Phonation.MODAL,
            secondary_articulation=Place.LABIODENTAL,
        )
        syllable = Syllable(onset=[nasal], nucleus=[Vowel(height=0, backness=0)])
        assert encode(syllable) == "[n͡ɱa]"
        assert encode(syllable, "x-sampa") == "[n)Fa]"

    def test_tone(self):
        assert encode(Syllable(tone=Tone(1, 1, 1))) == "[ə˦]"
        assert encode(Syllable(tone=Tone(-2, 0, 2)), "kirschenbaum") == "[@135]"
        assert encode(Syllable(tone=Tone(0, 0, 1)), "x-sampa") == "[@_M_M_H]"

    def test_leading_tone_moves_to_end(self):
        assert convert("[_La]", "x-sampa", "x-sampa") == "[a_L]"

    def test_syllabicity(self):
        assert convert("[n=]", "x-sampa", "ipa") == "[n̩]"
        assert convert("[ai_^]", "x-sampa", "ipa") == "[ai̯]"

    def test_nearest_vowel_letter(self):
        syllable = Syllable(nucleus=[Vowel(height=1, backness=4)])
        assert encode(syllable) == "[ʌ̞]"


class TestEncodeErrors:
    def test_fractional_vowel(self):
        with pytest.raises(EncodingFailed):
            encode(Syllable(nucleus=[Vowel(height=3.5)]))

    def test_unsupported_length(self):
        with pytest.raises(EncodingFailed, match="Length"):
            encode(Syllable(nucleus=[Vowel(length=1.25)]))

    def test_epiglottal_stop_in_kirschenbaum(self):
        with pytest.raises(EncodingFailed):
            convert("[ʡa]", "ipa", "kirschenbaum")

    def test_labiodental_flap_in_x_sampa(self):
        with pytest.raises(EncodingFailed):
            convert("[ⱱa]", "ipa", "x-sampa")

    def test_unwritable_secondary_articulation(self):
        stop = Consonant(vot=VOT.NOT_ASPIRATED, secondary_articulation=Place.LABIODENTAL)
        with pytest.raises(EncodingFailed):
            encode(Syllable(onset=[stop]))


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------


MODIFIED_PHONES = [
    Consonant(manner=Manner.NASAL, vot=VOT.NOT_ASPIRATED),
    Consonant(phonation=Phonation.BREATHY, vot=VOT.COMPLETELY_VOICED),
    Consonant(place=Place.LAMINAL_ALVEOLAR, vot=VOT.NOT_ASPIRATED),
    Consonant(manner=Manner.SIBILANT_FRICATIVE, place=Place.SUBAPICAL_RETROFLEX),
    Consonant(place=Place.VELAR, mechanism=Mechanism.EJECTIVE, vot=VOT.NOT_ASPIRATED),
    Consonant(
        manner=Manner.LATERAL_APPROXIMANT,
        phonation=Phonation.MODAL,
        secondary_articulation=Place.VELAR,
    ),
    Consonant(
        manner=Manner.APPROXIMANT,
        place=Place.PALATAL,
        phonation=Phonation.MODAL,
        nasalization=Nasalization.NASAL,
    ),
    Consonant(vot=VOT.WEAKLY_ASPIRATED, length=1.5),
    Consonant(place=Place.BILABIAL, phonation=Phonation.MODAL, vot=VOT.WEAKLY_VOICED),
    Vowel(phonation=Phonation.VOICELESS),
    Vowel(phonation=Phonation.CREAKY, r_colored=True),
    Vowel(height=6, backness=4, roundedness=Roundedness.ENDOLABIAL),
    Vowel(nasalization=Nasalization.STRONGLY_NASAL, length=3.0),
    Vowel(height=1, backness=1, length=0.5),
]


class TestRoundTrip:
    @pytest.mark.parametrize("source", NOTATIONS)
    def test_every_consonant_letter(self, source):
        for letter in CONSONANT_LETTERS:
            if source not in letter.symbols:
                continue
            syllable = decode(f"[{letter.symbols[source]}a]", source)
            ipa = letter.symbols[Notation.IPA]
            for target in NOTATIONS:
                if (ipa, target) in UNSPELLABLE:
                    with pytest.raises(EncodingFailed):
                        encode(syllable, target)
                    continue
                assert _round_trip(syllable, target) == syllable, (ipa, target)

    @pytest.mark.parametrize("source", NOTATIONS)
    def test_every_vowel_letter(self, source):
        for letter in VOWEL_LETTERS:
            syllable = decode(f"[{letter.symbols[source]}]", source)
            for target in NOTATIONS:
                text = encode(syllable, target)
                assert text == f"[{letter.symbols[target]}]"
                assert decode(text, target) == syllable

    @pytest.mark.parametrize("notation", NOTATIONS)
    def test_every_tone(self, notation):
        for tone in Tone.all():
            syllable = Syllable(tone=tone)
            assert _round_trip(syllable, notation) == syllable, tone

    @pytest.mark.parametrize("phone", MODIFIED_PHONES, ids=str)
    @pytest.mark.parametrize("notation", NOTATIONS)
    def test_modified_phones(self, phone, notation):
        if isinstance(phone, Vowel):
            syllable = Syllable(nucleus=[phone])
        else:
            syllable = Syllable(onset=[phone], coda=[phone])
        assert _round_trip(syllable, notation) == syllable

    @pytest.mark.parametrize("notation", NOTATIONS)
    def test_rich_syllable(self, rich_syllable, notation):
        assert _round_trip(rich_syllable, notation) == rich_syllable

    @pytest.mark.parametrize("notation", NOTATIONS)
    def test_consonant_nucleus(self, voiced_n, notation):
        syllable = Syllable(onset=[Consonant()], nucleus=[voiced_n], coda=[Vowel()])
        assert _round_trip(syllable, notation) == syllable


class TestGridRoundTrip:
    @pytest.mark.parametrize("manner", list(Manner), ids=lambda m: m.name.lower())
    @pytest.mark.parametrize("notation", NOTATIONS)
    def test_consonant_cells(self, manner, notation):
        for place in Place:
            for phonation in (Phonation.VOICELESS, Phonation.MODAL):
                consonant = _plain_consonant(manner, place, phonation)
                if consonant is None:
                    continue
                syllable = Syllable(onset=[consonant])
                if not _has_spelling(manner, place, notation):
                    with pytest.raises(EncodingFailed):
                        encode(syllable, notation)
                    continue
                assert _round_trip(syllable, notation) == syllable, (place, phonation)

    @pytest.mark.parametrize(
        "notation, expected",
        [(Notation.IPA, 80), (Notation.KIRSCHENBAUM, 82), (Notation.X_SAMPA, 86)],
    )
    def test_unspellable_count(self, notation, expected):
        unspellable = 0
        for manner in Manner:
            for place in Place:
                for phonation in (Phonation.VOICELESS, Phonation.MODAL):
                    consonant = _plain_consonant(manner, place, phonation)
                    if consonant is None:
                        continue
                    try:
                        encode(Syllable(onset=[consonant]), notation)
                    except EncodingFailed:
                        unspellable += 1
        assert unspellable == expected

    @pytest.mark.parametrize("roundedness", list(Roundedness), ids=lambda r: r.name.lower())
    @pytest.mark.parametrize("notation", NOTATIONS)
    def test_vowel_cells(self, roundedness, notation):
        for height in range(7):
            for backness in range(5):
                vowel = Vowel(height=height, backness=backness, roundedness=roundedness)
                syllable = Syllable(nucleus=[vowel])
                assert _round_trip(syllable, notation) == syllable, (height, backness)

    @pytest.mark.parametrize("notation", NOTATIONS)
    def test_affricate_letter_pairs(self, notation):
        stops = [
            letter for letter in CONSONANT_LETTERS
            if letter.manner is Manner.STOP
            and letter.mechanism is Mechanism.PULMONIC_EGRESSIVE
        ]
        fricatives = [
            letter for letter in CONSONANT_LETTERS
            if letter.manner.is_fricative and letter.secondary is None
        ]
        for stop in stops:
            for fricative in fricatives:
                text = f"[{stop.symbols[Notation.IPA]}͡{fricative.symbols[Notation.IPA]}a]"
                syllable = decode(text, Notation.IPA)
                unwritable = notation is Notation.KIRSCHENBAUM and (
                    stop.place is P.EPIGLOTTAL or fricative.place is P.EPIGLOTTAL
                )
                if unwritable:
                    with pytest.raises(EncodingFailed):
                        encode(syllable, notation)
                    continue
                assert _round_trip(syllable, notation) == syllable, text
