"""Vowels and consonants.

A phone stores each feature on a scale. Every mutation is applied to a
copy of the affected scales first, the resulting feature snapshot is run
through the validator, and only then are the copies committed. A failed
mutation leaves the phone exactly as it was.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any

from phonetix.features.categories import (
    VOT,
    Backness,
    Category,
    Height,
    Manner,
    Mechanism,
    Nasalization,
    Phonation,
    Place,
    Roundedness,
)
from phonetix.features.scales import CircularScale, ContinuousScale
from phonetix.features.validator import (
    BACKNESS_RANGE,
    DEFAULT_VALIDATOR,
    HEIGHT_RANGE,
    ArticulationValidator,
    ConsonantFeatures,
    Features,
    VowelFeatures,
)


def length_word(length: float) -> str:
    """Descriptive word for a relative length, empty for the reference 1.0."""
    if length < 0.5:
        return "extra-short"
    if length < 1.0:
        return "short"
    if length == 1.0:
        return ""
    if length < 2.0:
        return "half-long"
    if length < 3.0:
        return "long"
    return "extra-long"


def _point_label(value: float, points: type[Category]) -> str:
    if value == int(value):
        return points(int(value)).label
    lower = points(math.floor(value)).label
    upper = points(math.ceil(value)).label
    return f"{lower}-to-{upper}"


def _plain(value: Any) -> Any:
    if isinstance(value, (CircularScale, ContinuousScale)):
        return value.value
    return value


class Phone(ABC):
    """Base class for vowels and consonants.

    Owns the features every phone has: phonation, nasalization and
    relative length (1.0 is an ordinary segment).
    """

    def __init__(
        self,
        phonation: Any,
        nasalization: Any,
        length: float,
        validator: ArticulationValidator | None,
    ) -> None:
        self._validator = validator or DEFAULT_VALIDATOR
        self._phonation = CircularScale(Phonation, phonation)
        self._nasalization = CircularScale(Nasalization, nasalization)
        self._length = ContinuousScale(
            0.0, math.inf, length, lo_inclusive=False, name="length"
        )

    # -- capability interface -------------------------------------------

    @abstractmethod
    def features(self) -> Features:
        """Immutable snapshot of every feature."""

    @abstractmethod
    def description(self) -> str:
        """Phonetic description in words, e.g. 'mid central unrounded vowel'."""

    @abstractmethod
    def copy(self) -> Phone:
        """Independent copy with the same features and validator."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable feature dictionary."""

    @property
    def validator(self) -> ArticulationValidator:
        return self._validator

    def _apply(self, **changes: Any) -> None:
        """Validate then commit new scales, keyed by snapshot field name."""
        candidate = replace(
            self.features(), **{name: _plain(v) for name, v in changes.items()}
        )
        self._validator.check(candidate)
        for name, value in changes.items():
            setattr(self, f"_{name}", value)

    # -- phonation ------------------------------------------------------

    @property
    def phonation(self) -> Phonation:
        return self._phonation.value

    def set_phonation(self, phonation: Any) -> None:
        self._apply(phonation=self._phonation.copy().set(phonation))

    def incr_phonation(self, steps: int = 1) -> None:
        self._apply(phonation=self._phonation.shifted(steps))

    def decr_phonation(self, steps: int = 1) -> None:
        self._apply(phonation=self._phonation.shifted(-steps))

    # -- nasalization ---------------------------------------------------

    @property
    def nasalization(self) -> Nasalization:
        return self._nasalization.value

    def set_nasalization(self, nasalization: Any) -> None:
        self._apply(nasalization=self._nasalization.copy().set(nasalization))

    def incr_nasalization(self, steps: int = 1) -> None:
        self._apply(nasalization=self._nasalization.shifted(steps))

    def decr_nasalization(self, steps: int = 1) -> None:
        self._apply(nasalization=self._nasalization.shifted(-steps))

    def is_nasal(self) -> bool:
        return self.nasalization is not Nasalization.ORAL

    # -- length ---------------------------------------------------------

    @property
    def length(self) -> float:
        return self._length.value

    def set_length(self, length: float) -> None:
        self._apply(length=self._length.copy().set(length))

    def lengthen(self, delta: float = 0.5) -> None:
        self._apply(length=self._length.copy().advance(delta))

    def shorten(self, delta: float = 0.5) -> None:
        self._apply(length=self._length.copy().retreat(delta))

    def double_length(self) -> None:
        self._apply(length=self._length.copy().scale(2.0))

    def halve_length(self) -> None:
        self._apply(length=self._length.copy().scale(0.5))

    # -- comparison -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Phone):
            return NotImplemented
        return type(self) is type(other) and self.features() == other.features()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.description()


class Vowel(Phone):
    """A vowel.

    Height runs from 0.0 (open) to 6.0 (close) and backness from 0.0
    (front) to 4.0 (back); both accept fractional values. The default
    vowel is a mid central unrounded vowel (schwa).

    Raises:
        InvalidFeatureValue: If a feature value is outside its domain.
        ImpossibleArticulation: If the combination cannot be articulated.
    """

    def __init__(
        self,
        height: float = Height.MID,
        backness: float = Backness.CENTRAL,
        roundedness: Any = Roundedness.UNROUNDED,
        nasalization: Any = Nasalization.ORAL,
        r_colored: bool = False,
        phonation: Any = Phonation.MODAL,
        length: float = 1.0,
        validator: ArticulationValidator | None = None,
    ) -> None:
        super().__init__(phonation, nasalization, length, validator)
        self._height = ContinuousScale(*HEIGHT_RANGE, value=height, name="height")
        self._backness = ContinuousScale(
            *BACKNESS_RANGE, value=backness, name="backness"
        )
        self._roundedness = CircularScale(Roundedness, roundedness)
        self._r_colored = bool(r_colored)
        self._validator.check(self.features())

    @classmethod
    def from_features(
        cls,
        features: VowelFeatures,
        validator: ArticulationValidator | None = None,
    ) -> Vowel:
        return cls(
            height=features.height,
            backness=features.backness,
            roundedness=features.roundedness,
            nasalization=features.nasalization,
            r_colored=features.r_colored,
            phonation=features.phonation,
            length=features.length,
            validator=validator,
        )

    def features(self) -> VowelFeatures:
        return VowelFeatures(
            height=self._height.value,
            backness=self._backness.value,
            roundedness=self._roundedness.value,
            r_colored=self._r_colored,
            phonation=self._phonation.value,
            nasalization=self._nasalization.value,
            length=self._length.value,
        )

    def copy(self) -> Vowel:
        return Vowel.from_features(self.features(), self._validator)

    # -- height ---------------------------------------------------------

    @property
    def height(self) -> float:
        return self._height.value

    def set_height(self, height: float) -> None:
        self._apply(height=self._height.copy().set(height))

    def raise_height(self, delta: float = 1.0) -> None:
        self._apply(height=self._height.copy().advance(delta))

    def lower_height(self, delta: float = 1.0) -> None:
        self._apply(height=self._height.copy().retreat(delta))

    # -- backness -------------------------------------------------------

    @property
    def backness(self) -> float:
        return self._backness.value

    def set_backness(self, backness: float) -> None:
        self._apply(backness=self._backness.copy().set(backness))

    def move_back(self, delta: float = 1.0) -> None:
        self._apply(backness=self._backness.copy().advance(delta))

    def move_forward(self, delta: float = 1.0) -> None:
        self._apply(backness=self._backness.copy().retreat(delta))

    # -- rounding and rhoticity -----------------------------------------

    @property
    def roundedness(self) -> Roundedness:
        return self._roundedness.value

    def set_roundedness(self, roundedness: Any) -> None:
        self._apply(roundedness=self._roundedness.copy().set(roundedness))

    def incr_roundedness(self, steps: int = 1) -> None:
        self._apply(roundedness=self._roundedness.shifted(steps))

    def decr_roundedness(self, steps: int = 1) -> None:
        self._apply(roundedness=self._roundedness.shifted(-steps))

    def is_rounded(self) -> bool:
        return self.roundedness is not Roundedness.UNROUNDED

    def is_r_colored(self) -> bool:
        return self._r_colored

    def r_color(self) -> None:
        self._apply(r_colored=True)

    def de_r_color(self) -> None:
        self._apply(r_colored=False)

    # -- rendering ------------------------------------------------------

    def description(self) -> str:
        words = [length_word(self.length)]
        if self.phonation is not Phonation.MODAL:
            words.append(self.phonation.label)
        if self.is_nasal():
            words.append(self.nasalization.label)
        if self._r_colored:
            words.append("r-colored")
        words += [
            _point_label(self.height, Height),
            _point_label(self.backness, Backness),
            self.roundedness.label,
            "vowel",
        ]
        return " ".join(w for w in words if w)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "vowel",
            "height": self.height,
            "backness": self.backness,
            "roundedness": self.roundedness.name.lower(),
            "r_colored": self._r_colored,
            "phonation": self.phonation.name.lower(),
            "nasalization": self.nasalization.name.lower(),
            "length": self.length,
            "description": self.description(),
        }

    def __repr__(self) -> str:
        return (
            f"Vowel(height={self.height:g}, backness={self.backness:g}, "
            f"roundedness={self.roundedness.name}, length={self.length:g})"
        )


class Consonant(Phone):
    """A consonant.

    When ``vot`` is omitted it defaults to moderately aspirated for a
    voiceless phonation and completely voiced otherwise, so the default
    consonant is an aspirated voiceless alveolar stop.

    A consonant without a secondary articulation reports its primary
    place as ``secondary_articulation``; moving the primary place then
    moves both.

    An affricate is a stop with a fricative ``release``. A homorganic
    release has no ``release_place`` of its own and follows the stop.

    Raises:
        InvalidFeatureValue: If a feature value is outside its domain.
        ImpossibleArticulation: If the combination cannot be articulated.
    """

    def __init__(
        self,
        manner: Any = Manner.STOP,
        place: Any = Place.APICAL_ALVEOLAR,
        phonation: Any = Phonation.VOICELESS,
        vot: Any = None,
        nasalization: Any = Nasalization.ORAL,
        mechanism: Any = Mechanism.PULMONIC_EGRESSIVE,
        length: float = 1.0,
        secondary_articulation: Any = None,
        release: Any = None,
        release_place: Any = None,
        validator: ArticulationValidator | None = None,
    ) -> None:
        super().__init__(phonation, nasalization, length, validator)
        self._manner = CircularScale(Manner, manner)
        self._place = CircularScale(Place, place)
        self._secondary_place = CircularScale(
            Place, place if secondary_articulation is None else secondary_articulation
        )
        if vot is None:
            vot = (
                VOT.COMPLETELY_VOICED
                if self.phonation.is_voiced
                else VOT.MODERATELY_ASPIRATED
            )
        self._vot = CircularScale(VOT, vot)
        self._mechanism = CircularScale(Mechanism, mechanism)
        self._release = None if release is None else Manner.coerce(release)
        self._release_place = (
            None if release_place is None else Place.coerce(release_place)
        )
        self._validator.check(self.features())

    @classmethod
    def from_features(
        cls,
        features: ConsonantFeatures,
        validator: ArticulationValidator | None = None,
    ) -> Consonant:
        return cls(
            manner=features.manner,
            place=features.place,
            phonation=features.phonation,
            vot=features.vot,
            nasalization=features.nasalization,
            mechanism=features.mechanism,
            length=features.length,
            secondary_articulation=features.secondary_place,
            release=features.release,
            release_place=features.release_place,
            validator=validator,
        )

    def features(self) -> ConsonantFeatures:
        place = self._place.value
        release_place = self._release_place
        if release_place is place:
            release_place = None
        return ConsonantFeatures(
            manner=self._manner.value,
            place=place,
            secondary_place=self._secondary_place.value,
            vot=self._vot.value,
            mechanism=self._mechanism.value,
            phonation=self._phonation.value,
            nasalization=self._nasalization.value,
            length=self._length.value,
            release=self._release,
            release_place=release_place,
        )

    def copy(self) -> Consonant:
        return Consonant.from_features(self.features(), self._validator)

    # -- manner ---------------------------------------------------------

    @property
    def manner(self) -> Manner:
        return self._manner.value

    def set_manner(self, manner: Any) -> None:
        self._apply(manner=self._manner.copy().set(manner))

    def incr_manner(self, steps: int = 1) -> None:
        self._apply(manner=self._manner.shifted(steps))

    def decr_manner(self, steps: int = 1) -> None:
        self._apply(manner=self._manner.shifted(-steps))

    # -- place ----------------------------------------------------------

    @property
    def place(self) -> Place:
        return self._place.value

    def _move_place(self, place: CircularScale) -> None:
        if self.has_secondary_articulation():
            self._apply(place=place)
        else:
            self._apply(place=place, secondary_place=place.copy())

    def set_place(self, place: Any) -> None:
        self._move_place(self._place.copy().set(place))

    def incr_place(self, steps: int = 1) -> None:
        self._move_place(self._place.shifted(steps))

    def decr_place(self, steps: int = 1) -> None:
        self._move_place(self._place.shifted(-steps))

    # -- secondary articulation -----------------------------------------

    def has_secondary_articulation(self) -> bool:
        return self._secondary_place != self._place

    @property
    def secondary_articulation(self) -> Place:
        return self._secondary_place.value

    def set_secondary_articulation(self, place: Any) -> None:
        self._apply(secondary_place=self._secondary_place.copy().set(place))

    def remove_secondary_articulation(self) -> None:
        self._apply(secondary_place=self._place.copy())

    def incr_secondary_articulation(self, steps: int = 1) -> None:
        self._apply(secondary_place=self._secondary_place.shifted(steps))

    def decr_secondary_articulation(self, steps: int = 1) -> None:
        self._apply(secondary_place=self._secondary_place.shifted(-steps))

    # -- affricate release ----------------------------------------------

    def is_affricate(self) -> bool:
        return self._release is not None

    @property
    def release(self) -> Manner | None:
        """Fricative manner of the release, None for a plain consonant."""
        return self._release

    @property
    def release_place(self) -> Place | None:
        if self._release is None:
            return None
        if self._release_place is None:
            return self.place
        return self._release_place

    def set_release(self, manner: Any, place: Any = None) -> None:
        """Release the stop into a fricative, making it an affricate.

        Args:
            manner: A fricative manner.
            place: Place of the release. Omitted, the release is
                homorganic and follows the stop's place.

        Raises:
            ImpossibleArticulation: If the consonant is not a stop or the
                release is not a fricative possible at its place.
        """
        self._apply(
            release=Manner.coerce(manner),
            release_place=None if place is None else Place.coerce(place),
        )

    def remove_release(self) -> None:
        self._apply(release=None, release_place=None)

    # -- voice onset time -----------------------------------------------

    @property
    def vot(self) -> VOT:
        return self._vot.value

    def set_vot(self, vot: Any) -> None:
        self._apply(vot=self._vot.copy().set(vot))

    def later_vot(self, steps: int = 1) -> None:
        self._apply(vot=self._vot.shifted(steps))

    def earlier_vot(self, steps: int = 1) -> None:
        self._apply(vot=self._vot.shifted(-steps))

    # -- airstream mechanism --------------------------------------------

    @property
    def mechanism(self) -> Mechanism:
        return self._mechanism.value

    def set_mechanism(self, mechanism: Any) -> None:
        self._apply(mechanism=self._mechanism.copy().set(mechanism))

    def incr_mechanism(self, steps: int = 1) -> None:
        # Stepping the mechanism is not cross-validated.
        self._mechanism.advance(steps)

    def decr_mechanism(self, steps: int = 1) -> None:
        self._mechanism.retreat(steps)

    # -- rendering ------------------------------------------------------

    def _default_vot(self) -> VOT:
        if self.phonation.is_voiced:
            return VOT.COMPLETELY_VOICED
        return VOT.NOT_ASPIRATED

    def description(self) -> str:
        phonation = self.phonation
        words = [
            length_word(self.length),
            "voiced" if phonation is Phonation.MODAL else phonation.label,
        ]
        if self.vot is not self._default_vot():
            words.append(self.vot.label)
        if self.is_nasal():
            words.append(self.nasalization.label)
        if self.mechanism is not Mechanism.PULMONIC_EGRESSIVE:
            words.append(self.mechanism.label)
        words += [self.place.label, self.manner.label]
        if self.is_affricate():
            release = self.release.label
            if self.features().release_place is not None:
                release = f"{self.release_place.label} {release}"
            words.append(f"with {release} release")
        if self.has_secondary_articulation():
            words.append(
                f"with {self.secondary_articulation.label} secondary articulation"
            )
        return " ".join(w for w in words if w)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "consonant",
            "manner": self.manner.name.lower(),
            "place": self.place.name.lower(),
            "secondary_articulation": (
                self.secondary_articulation.name.lower()
                if self.has_secondary_articulation()
                else None
            ),
            "release": self.release.name.lower() if self.is_affricate() else None,
            "release_place": (
                self.release_place.name.lower() if self.is_affricate() else None
            ),
            "phonation": self.phonation.name.lower(),
            "vot": self.vot.name.lower(),
            "mechanism": self.mechanism.name.lower(),
            "nasalization": self.nasalization.name.lower(),
            "length": self.length,
            "description": self.description(),
        }

    def __repr__(self) -> str:
        return (
            f"Consonant(manner={self.manner.name}, place={self.place.name}, "
            f"phonation={self.phonation.name}, vot={self.vot.name})"
        )
