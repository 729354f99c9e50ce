"""Shared test fixtures for phonetix."""

import pytest

from phonetix.features import (
    VOT,
    Consonant,
    Manner,
    Nasalization,
    Phonation,
    Place,
    Syllable,
    Tone,
    Vowel,
)


@pytest.fixture
def schwa() -> Vowel:
    """The default vowel: mid central unrounded."""
    return Vowel()


@pytest.fixture
def plain_t() -> Consonant:
    """Unaspirated voiceless alveolar stop, as decoded from a bare 't'."""
    return Consonant(vot=VOT.NOT_ASPIRATED)


@pytest.fixture
def voiced_n() -> Consonant:
    """Voiced alveolar nasal."""
    return Consonant(manner=Manner.NASAL, phonation=Phonation.MODAL)


@pytest.fixture
def rich_syllable() -> Syllable:
    """A syllable exercising secondary articulation, length, nasality and tone."""
    onset = Consonant(
        manner=Manner.STOP,
        place=Place.VELAR,
        vot=VOT.STRONGLY_ASPIRATED,
        secondary_articulation=Place.BILABIAL,
    )
    nucleus = Vowel(height=1, backness=3, nasalization=Nasalization.NASAL, length=2.0)
    coda = Consonant(manner=Manner.NASAL, phonation=Phonation.MODAL)
    return Syllable(onset=[onset], nucleus=[nucleus], coda=[coda], tone=Tone(2, 0, -2))
