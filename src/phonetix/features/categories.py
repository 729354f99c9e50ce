"""Categorical articulatory features.

Each enumeration's integer value is the index used by
:class:`~phonetix.features.scales.CircularScale`, so stepping through a
category walks these members in declaration order.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from phonetix.errors import InvalidFeatureValue


class Category(IntEnum):
    """Base for the feature enumerations: labels and lenient coercion."""

    @property
    def label(self) -> str:
        """Human readable name, as used in phone descriptions."""
        default = self.name.lower().replace("_", " ")
        return _LABELS.get((type(self).__name__, self.name), default)

    @classmethod
    def coerce(cls, value: Any) -> Category:
        """Convert a member, index, name or label into a member.

        Raises:
            InvalidFeatureValue: If ``value`` names no member of ``cls``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (bool, Category)):
            raise InvalidFeatureValue(f"{value!r} is not a {cls.__name__}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidFeatureValue(
                    f"{value} is not a {cls.__name__} value"
                ) from None
        if isinstance(value, str):
            key = value.strip().lower()
            name = key.replace("-", "_").replace(" ", "_")
            for member in cls:
                if key == member.label or name == member.name.lower():
                    return member
        raise InvalidFeatureValue(f"{value!r} is not a {cls.__name__}")


class Phonation(Category):
    VOICELESS = 0
    BREATHY = 1
    SLACK = 2
    MODAL = 3
    STIFF = 4
    CREAKY = 5
    GLOTTAL_CLOSURE = 6
    FAUCALIZED = 7
    HARSH = 8
    STRIDENT = 9

    @property
    def is_voiced(self) -> bool:
        return self is not Phonation.VOICELESS


class Nasalization(Category):
    ORAL = 0
    NASAL = 1
    STRONGLY_NASAL = 2


class Roundedness(Category):
    UNROUNDED = 0
    EXOLABIAL = 1
    ENDOLABIAL = 2


class Height(Category):
    """Named points on the vowel height scale (0.0 open to 6.0 close)."""

    OPEN = 0
    NEAR_OPEN = 1
    OPEN_MID = 2
    MID = 3
    CLOSE_MID = 4
    NEAR_CLOSE = 5
    CLOSE = 6


class Backness(Category):
    """Named points on the vowel backness scale (0.0 front to 4.0 back)."""

    FRONT = 0
    NEAR_FRONT = 1
    CENTRAL = 2
    NEAR_BACK = 3
    BACK = 4


class Manner(Category):
    LATERAL_FLAP = 0
    LATERAL_APPROXIMANT = 1
    LATERAL_FRICATIVE = 2
    TRILL = 3
    FLAP = 4
    APPROXIMANT = 5
    NONSIBILANT_FRICATIVE = 6
    SIBILANT_FRICATIVE = 7
    STOP = 8
    NASAL = 9

    @property
    def is_lateral(self) -> bool:
        return self in (
            Manner.LATERAL_FLAP,
            Manner.LATERAL_APPROXIMANT,
            Manner.LATERAL_FRICATIVE,
        )

    @property
    def is_fricative(self) -> bool:
        return self in (
            Manner.LATERAL_FRICATIVE,
            Manner.NONSIBILANT_FRICATIVE,
            Manner.SIBILANT_FRICATIVE,
        )


class Place(Category):
    BILABIAL = 0
    LABIODENTAL = 1
    DENTOLABIAL = 2
    BIDENTAL = 3
    APICAL_LINGUOLABIAL = 4
    LAMINAL_LINGUOLABIAL = 5
    APICAL_LOWER_LIP = 6
    LAMINAL_LOWER_LIP = 7
    INTERDENTAL = 8
    APICAL_DENTAL = 9
    LAMINAL_DENTAL = 10
    APICAL_ALVEOLAR = 11
    LAMINAL_ALVEOLAR = 12
    APICAL_PALATO_ALVEOLAR = 13
    LAMINAL_PALATO_ALVEOLAR = 14
    APICAL_RETROFLEX = 15
    LAMINAL_RETROFLEX = 16
    SUBAPICAL_RETROFLEX = 17
    ALVEOLO_PALATAL = 18
    PALATAL = 19
    VELAR = 20
    UVULAR = 21
    PHARYNGEAL = 22
    EPIGLOTTAL = 23
    GLOTTAL = 24

    @property
    def is_labial(self) -> bool:
        return self <= Place.BIDENTAL


class VOT(Category):
    """Voice onset time, from fully voiced to strongly aspirated."""

    COMPLETELY_VOICED = 0
    MODERATELY_VOICED = 1
    WEAKLY_VOICED = 2
    NOT_ASPIRATED = 3
    WEAKLY_ASPIRATED = 4
    MODERATELY_ASPIRATED = 5
    STRONGLY_ASPIRATED = 6

    @property
    def is_voiced(self) -> bool:
        return self <= VOT.WEAKLY_VOICED


class Mechanism(Category):
    """Airstream mechanism."""

    PULMONIC_EGRESSIVE = 0
    EJECTIVE = 1
    CLICK = 2
    IMPLOSIVE = 3


class Pitch(Category):
    """Relative pitch level of one tone slot, low to high."""

    EXTRA_LOW = -2
    LOW = -1
    MID = 0
    HIGH = 1
    EXTRA_HIGH = 2


# Keyed by (class name, member name): members of different enumerations
# with the same index compare equal.
_LABELS: dict[tuple[str, str], str] = {
    ("Nasalization", "STRONGLY_NASAL"): "strongly-nasal",
    ("Roundedness", "EXOLABIAL"): "rounded",
    ("Roundedness", "ENDOLABIAL"): "endolabial rounded",
    ("Height", "NEAR_OPEN"): "near-open",
    ("Height", "OPEN_MID"): "open-mid",
    ("Height", "CLOSE_MID"): "close-mid",
    ("Height", "NEAR_CLOSE"): "near-close",
    ("Backness", "NEAR_FRONT"): "near-front",
    ("Backness", "NEAR_BACK"): "near-back",
    ("Phonation", "GLOTTAL_CLOSURE"): "glottalized",
    ("Manner", "NONSIBILANT_FRICATIVE"): "non-sibilant fricative",
    ("Place", "APICAL_LOWER_LIP"): "apical lower-lip",
    ("Place", "LAMINAL_LOWER_LIP"): "laminal lower-lip",
    ("Place", "APICAL_PALATO_ALVEOLAR"): "apical palato-alveolar",
    ("Place", "LAMINAL_PALATO_ALVEOLAR"): "laminal palato-alveolar",
    ("Place", "ALVEOLO_PALATAL"): "alveolo-palatal",
    ("Mechanism", "PULMONIC_EGRESSIVE"): "pulmonic",
}
