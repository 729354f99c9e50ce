"""Articulatory feature model: scales, phones, tones and syllables."""

from phonetix.features.categories import (
    VOT,
    Backness,
    Height,
    Manner,
    Mechanism,
    Nasalization,
    Phonation,
    Pitch,
    Place,
    Roundedness,
)
from phonetix.features.phones import Consonant, Phone, Vowel
from phonetix.features.scales import CircularScale, ContinuousScale
from phonetix.features.syllable import Syllable
from phonetix.features.tone import Tone
from phonetix.features.validator import (
    DEFAULT_VALIDATOR,
    ArticulationValidator,
    ConsonantFeatures,
    Rule,
    VowelFeatures,
)

__all__ = [
    "ArticulationValidator",
    "Backness",
    "CircularScale",
    "Consonant",
    "ConsonantFeatures",
    "ContinuousScale",
    "DEFAULT_VALIDATOR",
    "Height",
    "Manner",
    "Mechanism",
    "Nasalization",
    "Phonation",
    "Phone",
    "Pitch",
    "Place",
    "Roundedness",
    "Rule",
    "Syllable",
    "Tone",
    "VOT",
    "Vowel",
    "VowelFeatures",
]
