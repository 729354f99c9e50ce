"""Syllable to transcription text.

Modifiers are always written in one canonical order, so encoding the
result of a decode normalizes the spelling of a transcription.
"""

from __future__ import annotations

import logging
from typing import Any

from phonetix.errors import EncodingFailed
from phonetix.features.categories import (
    VOT,
    Mechanism,
    Nasalization,
    Phonation,
    Pitch,
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
    PLACE_DERIVATIONS,
    PLACE_MARKS,
    SECONDARY_MARKS,
    VOT_MARKS,
    ConsonantLetter,
    Mark,
)
from phonetix.transcription.table import SymbolTable, symbol_table

logger = logging.getLogger(__name__)

_LENGTHS = {length: mark for mark, length in LENGTH_MARKS.items()}
_PHONATIONS = {phonation: mark for mark, phonation in PHONATION_MARKS.items()}
_NASALIZATIONS = {level: mark for mark, level in NASALIZATION_MARKS.items()}
_SECONDARIES = {place: mark for mark, place in SECONDARY_MARKS.items()}
_VOTS = {vot: mark for mark, vot in VOT_MARKS.items() if mark is not Mark.UNASPIRATED}
_TOLERANCE = 1e-9


def encode(syllable: Syllable, notation: Any = Notation.IPA) -> str:
    """Transcribe a syllable, enclosed in square brackets.

    Args:
        syllable: The syllable to transcribe.
        notation: Target notation; IPA by default.

    Returns:
        The transcription, tone marks last.

    Raises:
        EncodingFailed: If a feature combination has no symbol in
            ``notation``.
    """
    notation = Notation.coerce(notation)
    table = symbol_table(notation)
    parts = []
    for phones, in_nucleus in (
        (syllable.onset, False),
        (syllable.nucleus, True),
        (syllable.coda, False),
    ):
        for phone in phones:
            parts.append(_encode_phone(phone, in_nucleus, table))
    parts.append(_encode_tone(syllable.tone, table))
    text = "[" + "".join(parts) + "]"
    logger.debug("Encoded %r as %s %r", syllable, notation.value, text)
    return text


def _encode_phone(phone: Phone, in_nucleus: bool, table: SymbolTable) -> str:
    if isinstance(phone, Consonant):
        return _encode_consonant(phone, in_nucleus, table)
    if isinstance(phone, Vowel):
        return _encode_vowel(phone, in_nucleus, table)
    raise EncodingFailed(f"Cannot encode {type(phone).__name__}")


def _symbol(table: SymbolTable, mark: Mark, phone: Phone) -> str:
    text = table.mark(mark)
    if text is None:
        raise EncodingFailed(
            f"{table.notation.value} has no {mark.value} mark, needed for "
            f"{phone.description()}"
        )
    return text


def _length_mark(phone: Phone) -> Mark | None:
    length = phone.length
    if abs(length - 1.0) < _TOLERANCE:
        return None
    for value, mark in _LENGTHS.items():
        if abs(length - value) < _TOLERANCE:
            return mark
    raise EncodingFailed(
        f"Length {length:g} has no mark; supported lengths are "
        f"{', '.join(f'{v:g}' for v in sorted([1.0, *_LENGTHS]))}"
    )


def _pick(letters: dict[bool, ConsonantLetter], voiced: bool) -> ConsonantLetter:
    return letters.get(voiced) or letters[not voiced]


def _consonant_letter(
    consonant: Consonant, table: SymbolTable
) -> tuple[ConsonantLetter, frozenset[Mark], bool]:
    """Choose a base letter.

    Returns:
        The letter, the place marks it needs and whether the letter
        already carries the secondary articulation.
    """
    manner = consonant.manner
    mechanism = consonant.mechanism
    if mechanism is Mechanism.EJECTIVE:
        mechanism = Mechanism.PULMONIC_EGRESSIVE
    secondary = (
        consonant.secondary_articulation
        if consonant.has_secondary_articulation()
        else None
    )
    voiced = consonant.phonation.is_voiced

    candidates = [(consonant.place, frozenset())]
    candidates += PLACE_DERIVATIONS.get(consonant.place, ())
    for anchor, marks in candidates:
        if secondary is not None:
            letters = table.consonant_letters(manner, anchor, mechanism, secondary)
            if letters:
                return _pick(letters, voiced), marks, True
        letters = table.consonant_letters(manner, anchor, mechanism)
        if letters:
            return _pick(letters, voiced), marks, False
    raise EncodingFailed(
        f"{table.notation.value} has no symbol for a {consonant.description()}"
    )


def _release(
    consonant: Consonant, letter: ConsonantLetter, table: SymbolTable
) -> list[str]:
    """Tie bar and fricative letter spelling an affricate's release.

    A homorganic release is written at the stop letter's place, so the
    stop's place marks cover both letters.
    """
    place = consonant.features().release_place
    if place is None:
        place = letter.place
    elif place is letter.place:
        raise EncodingFailed(
            f"{table.notation.value} cannot set a {place.label} release apart "
            f"from the stop letter in a {consonant.description()}"
        )
    letters = table.consonant_letters(
        consonant.release, place, Mechanism.PULMONIC_EGRESSIVE
    )
    if not letters:
        raise EncodingFailed(
            f"{table.notation.value} has no {place.label} "
            f"{consonant.release.label} letter for the release of a "
            f"{consonant.description()}"
        )
    return [_symbol(table, Mark.TIE, consonant), table.letter(_pick(letters, letter.voiced))]


def _encode_consonant(consonant: Consonant, in_nucleus: bool, table: SymbolTable) -> str:
    letter, place_marks, has_secondary = _consonant_letter(consonant, table)
    text = [table.letter(letter)]
    marks: list[Mark] = [m for m in PLACE_MARKS if m in place_marks]
    if consonant.is_affricate():
        text += _release(consonant, letter, table)

    secondary_mark = None
    if consonant.has_secondary_articulation() and not has_secondary:
        place = consonant.secondary_articulation
        secondary_mark = _SECONDARIES.get(place)
        if secondary_mark is None or table.mark(secondary_mark) is None:
            secondary_mark = None
            if consonant.is_affricate():
                raise EncodingFailed(
                    f"{table.notation.value} has no {place.label} secondary mark "
                    f"and the tie bar already spells the release of a "
                    f"{consonant.description()}"
                )
            tied = table.consonant_letters(consonant.manner, place, letter.mechanism)
            if not tied:
                raise EncodingFailed(
                    f"{table.notation.value} has no way to write a "
                    f"{place.label} secondary articulation on a "
                    f"{consonant.manner.label}"
                )
            text.append(_symbol(table, Mark.TIE, consonant))
            text.append(table.letter(_pick(tied, letter.voiced)))

    phonation = consonant.phonation
    voiced = phonation.is_voiced
    if phonation in (Phonation.MODAL, Phonation.VOICELESS):
        if letter.voiced != voiced:
            marks.append(Mark.VOICED if voiced else Mark.DEVOICED)
    else:
        marks.append(_PHONATIONS[phonation])
    if consonant.mechanism is Mechanism.EJECTIVE:
        marks.append(Mark.EJECTIVE)
    if in_nucleus:
        marks.append(Mark.SYLLABIC)
    if consonant.nasalization is not Nasalization.ORAL:
        marks.append(_NASALIZATIONS[consonant.nasalization])
    if secondary_mark is not None:
        marks.append(secondary_mark)
    default_vot = VOT.COMPLETELY_VOICED if voiced else VOT.NOT_ASPIRATED
    if consonant.vot is not default_vot:
        marks.append(_VOTS[consonant.vot])
    length = _length_mark(consonant)
    if length is not None:
        marks.append(length)

    text += [_symbol(table, mark, consonant) for mark in marks]
    return "".join(text)


def _encode_vowel(vowel: Vowel, in_nucleus: bool, table: SymbolTable) -> str:
    height, backness = vowel.height, vowel.backness
    if height != int(height) or backness != int(backness):
        raise EncodingFailed(
            f"Vowel height {height:g} and backness {backness:g} must be whole "
            "steps to be transcribed"
        )
    rounded = vowel.is_rounded()
    letter = min(
        (v for v in table.vowel_letters if v.rounded == rounded),
        key=lambda v: abs(v.height - height) + abs(v.backness - backness),
    )
    d_height = int(height) - letter.height
    d_backness = int(backness) - letter.backness

    marks: list[Mark] = []
    marks += [Mark.ADVANCED] * max(0, -d_backness)
    marks += [Mark.RETRACTED] * max(0, d_backness)
    marks += [Mark.RAISED] * max(0, d_height)
    marks += [Mark.LOWERED] * max(0, -d_height)
    if vowel.roundedness is Roundedness.ENDOLABIAL:
        marks.append(Mark.ENDOLABIAL)
    if vowel.phonation is Phonation.VOICELESS:
        marks.append(Mark.DEVOICED)
    elif vowel.phonation is not Phonation.MODAL:
        marks.append(_PHONATIONS[vowel.phonation])
    if not in_nucleus:
        marks.append(Mark.NON_SYLLABIC)
    if vowel.nasalization is not Nasalization.ORAL:
        marks.append(_NASALIZATIONS[vowel.nasalization])
    if vowel.is_r_colored():
        marks.append(Mark.RHOTIC)
    length = _length_mark(vowel)
    if length is not None:
        marks.append(length)

    return table.letter(letter) + "".join(_symbol(table, m, vowel) for m in marks)


def _encode_tone(tone: Tone, table: SymbolTable) -> str:
    pitches = [Pitch(p) for p in tone]
    if all(p is Pitch.MID for p in pitches):
        return ""
    if tone.is_level():
        return table.tone(pitches[0])
    return "".join(table.tone(p) for p in pitches)
