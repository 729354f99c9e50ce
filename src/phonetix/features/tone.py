"""Three-point pitch contours."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from phonetix.errors import PhoneticValueError
from phonetix.features.categories import Pitch
from phonetix.features.scales import CircularScale
from phonetix.features.sequence import resolve_index

_LEVELS = len(Pitch)


class Tone:
    """A pitch contour sampled at three points in time.

    Each slot holds a pitch from -2 (extra low) to 2 (extra high). The
    default tone is flat mid pitch, ``Tone(0, 0, 0)``.

    Tones are ordered like a base-5 odometer: :meth:`advance` steps the
    last slot first and carries into earlier slots, cycling through all
    125 contours.

    Raises:
        InvalidFeatureValue: If a pitch is outside -2..2.
    """

    SLOTS = 3

    def __init__(self, first: Any = 0, second: Any = 0, third: Any = 0) -> None:
        self._slots = [CircularScale(Pitch, p) for p in (first, second, third)]

    @classmethod
    def from_sequence(cls, pitches: Iterable[Any]) -> Tone:
        """Build a tone from exactly three pitches.

        Raises:
            PhoneticValueError: If ``pitches`` does not hold three values.
        """
        values = list(pitches)
        if len(values) != cls.SLOTS:
            raise PhoneticValueError(
                f"A tone needs exactly {cls.SLOTS} pitches, got {len(values)}"
            )
        return cls(*values)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Tone:
        """The tone at position ``ordinal`` (mod 125) of the odometer order."""
        ordinal %= _LEVELS ** cls.SLOTS
        digits = []
        for _ in range(cls.SLOTS):
            ordinal, digit = divmod(ordinal, _LEVELS)
            digits.append(digit)
        members = list(Pitch)
        return cls(*(members[d] for d in reversed(digits)))

    @classmethod
    def all(cls) -> Iterator[Tone]:
        """Every tone, from (-2, -2, -2) to (2, 2, 2)."""
        for ordinal in range(_LEVELS ** cls.SLOTS):
            yield cls.from_ordinal(ordinal)

    @property
    def ordinal(self) -> int:
        value = 0
        for slot in self._slots:
            value = value * _LEVELS + slot.index
        return value

    @property
    def pitches(self) -> tuple[int, int, int]:
        return tuple(int(slot.value) for slot in self._slots)  # type: ignore[return-value]

    def is_level(self) -> bool:
        return len(set(self.pitches)) == 1

    def advance(self, steps: int = 1) -> Tone:
        """Step forward through the odometer order, wrapping at the end."""
        self._set_ordinal(self.ordinal + steps)
        return self

    def retreat(self, steps: int = 1) -> Tone:
        """Step backward through the odometer order, wrapping at the start."""
        return self.advance(-steps)

    def _set_ordinal(self, ordinal: int) -> None:
        self._slots = Tone.from_ordinal(ordinal)._slots

    def copy(self) -> Tone:
        return Tone(*self.pitches)

    def to_list(self) -> list[int]:
        return list(self.pitches)

    def __len__(self) -> int:
        return self.SLOTS

    def __getitem__(self, index: int) -> int:
        return int(self._slots[resolve_index(index, self.SLOTS)].value)

    def __setitem__(self, index: int, pitch: Any) -> None:
        slot = self._slots[resolve_index(index, self.SLOTS)]
        slot.set(pitch)

    def __iter__(self) -> Iterator[int]:
        return iter(self.pitches)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self.pitches)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tone):
            return NotImplemented
        return self.pitches == other.pitches

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tone{self.pitches}"
