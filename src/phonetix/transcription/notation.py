"""Supported transcription notations."""

from __future__ import annotations

from enum import Enum
from typing import Any

from phonetix.errors import PhoneticValueError


class Notation(Enum):
    IPA = "ipa"
    KIRSCHENBAUM = "kirschenbaum"
    X_SAMPA = "x-sampa"

    @classmethod
    def coerce(cls, value: Any) -> Notation:
        """Accept a member or a name such as 'ipa', 'unicode' or 'xsampa'.

        Raises:
            PhoneticValueError: If ``value`` names no notation.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            notation = _ALIASES.get(key)
            if notation is not None:
                return notation
        raise PhoneticValueError(
            f"Unknown notation {value!r}; expected one of "
            f"{', '.join(n.value for n in cls)}"
        )


_ALIASES: dict[str, Notation] = {
    "ipa": Notation.IPA,
    "unicode": Notation.IPA,
    "kirschenbaum": Notation.KIRSCHENBAUM,
    "ascii-ipa": Notation.KIRSCHENBAUM,
    "x-sampa": Notation.X_SAMPA,
    "xsampa": Notation.X_SAMPA,
}
