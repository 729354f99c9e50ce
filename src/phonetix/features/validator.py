"""Articulation rules.

A phone's features are checked as a whole against an ordered list of
rules. The validator is plain data: each :class:`Rule` names the phone
kind it applies to, a predicate over a feature snapshot and the message
reported when the predicate fails. The first failing rule wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from phonetix.errors import ImpossibleArticulation
from phonetix.features.categories import (
    VOT,
    Manner,
    Mechanism,
    Nasalization,
    Phonation,
    Place,
    Roundedness,
)

HEIGHT_RANGE: tuple[float, float] = (0.0, 6.0)
BACKNESS_RANGE: tuple[float, float] = (0.0, 4.0)


@dataclass(frozen=True)
class VowelFeatures:
    """Snapshot of every vowel feature, as seen by the validator."""

    height: float
    backness: float
    roundedness: Roundedness
    r_colored: bool
    phonation: Phonation
    nasalization: Nasalization
    length: float


@dataclass(frozen=True)
class ConsonantFeatures:
    """Snapshot of every consonant feature, as seen by the validator.

    ``secondary_place`` equals ``place`` when the consonant has no
    secondary articulation. ``release`` is the fricative manner of an
    affricate's release and ``release_place`` its place, ``None`` when
    the release is homorganic with the stop.
    """

    manner: Manner
    place: Place
    secondary_place: Place
    vot: VOT
    mechanism: Mechanism
    phonation: Phonation
    nasalization: Nasalization
    length: float
    release: Manner | None = None
    release_place: Place | None = None


Features = Union[VowelFeatures, ConsonantFeatures]


@dataclass(frozen=True)
class Rule:
    """One articulation constraint.

    Attributes:
        name: Short identifier reported with failures.
        applies_to: Snapshot types the rule inspects.
        predicate: Returns True when the snapshot satisfies the rule.
        message: Reported when the predicate fails.
    """

    name: str
    applies_to: tuple[type, ...]
    predicate: Callable[[Features], bool]
    message: str

    def holds(self, features: Features) -> bool:
        if not isinstance(features, self.applies_to):
            return True
        return bool(self.predicate(features))


_BOTH = (VowelFeatures, ConsonantFeatures)
_LABIAL_PLACES = frozenset(p for p in Place if p.is_labial)
_THROAT_PLACES = frozenset({Place.PHARYNGEAL, Place.EPIGLOTTAL, Place.GLOTTAL})


def _cell_possible(manner: Manner, place: Place) -> bool:
    if manner.is_lateral:
        return place not in _LABIAL_PLACES | _THROAT_PLACES
    if manner is Manner.NASAL:
        return place not in _THROAT_PLACES
    if manner in (Manner.TRILL, Manner.FLAP):
        return place not in (Place.VELAR, Place.GLOTTAL)
    return True


def _manner_place_possible(f: ConsonantFeatures) -> bool:
    return _cell_possible(f.manner, f.place)


def _release_possible(f: ConsonantFeatures) -> bool:
    if f.release is None:
        return f.release_place is None
    if f.manner is not Manner.STOP or not f.release.is_fricative:
        return False
    place = f.place if f.release_place is None else f.release_place
    return _cell_possible(f.release, place)


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(
        "voiced-phonation-vot",
        (ConsonantFeatures,),
        lambda f: not f.phonation.is_voiced or f.vot.is_voiced,
        "Voiced phonation requires a voiced VOT",
    ),
    Rule(
        "voiceless-phonation-vot",
        (ConsonantFeatures,),
        lambda f: f.phonation.is_voiced or not f.vot.is_voiced,
        "Voiceless phonation requires an aspiration VOT",
    ),
    Rule(
        "glottal-stop",
        (ConsonantFeatures,),
        lambda f: not (f.place is Place.GLOTTAL and f.manner is Manner.STOP)
        or f.phonation is Phonation.VOICELESS,
        "Glottal stops can only be voiceless",
    ),
    Rule(
        "vowel-glottal-closure",
        (VowelFeatures,),
        lambda f: f.phonation is not Phonation.GLOTTAL_CLOSURE,
        "Vowels cannot have glottal closure phonation",
    ),
    Rule(
        "length",
        _BOTH,
        lambda f: f.length > 0,
        "Length must be greater than 0",
    ),
    Rule(
        "height",
        (VowelFeatures,),
        lambda f: HEIGHT_RANGE[0] <= f.height <= HEIGHT_RANGE[1],
        "Height must be between 0.0 and 6.0",
    ),
    Rule(
        "backness",
        (VowelFeatures,),
        lambda f: BACKNESS_RANGE[0] <= f.backness <= BACKNESS_RANGE[1],
        "Backness must be between 0.0 and 4.0",
    ),
    Rule(
        "manner-place",
        (ConsonantFeatures,),
        _manner_place_possible,
        "Impossible manner-place combination",
    ),
    Rule(
        "affricate-release",
        (ConsonantFeatures,),
        _release_possible,
        "Only stops take a release, and it must be a fricative possible at its place",
    ),
)


class ArticulationValidator:
    """Checks feature snapshots against an ordered rule list.

    Args:
        rules: Rules in reporting order. Defaults to :data:`DEFAULT_RULES`.
    """

    def __init__(self, rules: tuple[Rule, ...] | list[Rule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def violations(self, features: Features) -> list[Rule]:
        """All rules the snapshot fails, in rule order."""
        return [rule for rule in self._rules if not rule.holds(features)]

    def is_valid(self, features: Features) -> bool:
        return all(rule.holds(features) for rule in self._rules)

    def check(self, features: Features) -> None:
        """Raise for the first rule the snapshot fails.

        Raises:
            ImpossibleArticulation: Carrying the rule's message and name.
        """
        for rule in self._rules:
            if not rule.holds(features):
                raise ImpossibleArticulation(rule.message, rule=rule.name)


DEFAULT_VALIDATOR = ArticulationValidator()
