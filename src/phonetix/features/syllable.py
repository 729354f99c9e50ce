"""Syllables: onset, nucleus, coda and tone."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from phonetix.errors import ImpossibleArticulation
from phonetix.features.phones import Consonant, Phone, Vowel
from phonetix.features.sequence import resolve_index, resolve_insertion
from phonetix.features.tone import Tone


def _owned(phones: Iterable[Phone] | None, part: str) -> list[Phone]:
    result = []
    for phone in phones or ():
        if not isinstance(phone, Phone):
            raise TypeError(f"{part} must contain phones, got {type(phone).__name__}")
        result.append(phone.copy())
    return result


class Syllable:
    """One syllable: an optional onset, a non-empty nucleus, an optional coda.

    The syllable copies every phone and the tone it is given, so later
    changes to the caller's objects do not leak in. Phones reached through
    the syllable (``syllable[0]``, :meth:`vowels`, ...) are the syllable's
    own and may be mutated in place.

    Args:
        onset: Phones before the nucleus.
        nucleus: Phones forming the syllable peak. ``None`` gives a lone
            schwa.
        coda: Phones after the nucleus.
        tone: Pitch contour; defaults to flat mid tone.

    Raises:
        ImpossibleArticulation: If ``nucleus`` is empty.
    """

    def __init__(
        self,
        onset: Iterable[Phone] | None = None,
        nucleus: Iterable[Phone] | None = None,
        coda: Iterable[Phone] | None = None,
        tone: Tone | None = None,
    ) -> None:
        self._onset = _owned(onset, "onset")
        self._nucleus = [Vowel()] if nucleus is None else _owned(nucleus, "nucleus")
        if not self._nucleus:
            raise ImpossibleArticulation("A syllable nucleus cannot be empty")
        self._coda = _owned(coda, "coda")
        self._tone = Tone() if tone is None else tone.copy()

    @classmethod
    def from_transcription(cls, text: str, notation: Any = "x-sampa") -> Syllable:
        """Decode a transcription of one syllable.

        Raises:
            DecodingFailed: If ``text`` is not a valid transcription.
        """
        from phonetix.transcription.decoder import decode

        return decode(text, notation)

    # -- parts ----------------------------------------------------------

    @property
    def onset(self) -> tuple[Phone, ...]:
        return tuple(self._onset)

    @property
    def nucleus(self) -> tuple[Phone, ...]:
        return tuple(self._nucleus)

    @property
    def coda(self) -> tuple[Phone, ...]:
        return tuple(self._coda)

    @property
    def phones(self) -> tuple[Phone, ...]:
        return tuple(self._onset + self._nucleus + self._coda)

    def vowels(self) -> list[Vowel]:
        return [p for p in self.phones if isinstance(p, Vowel)]

    def consonants(self) -> list[Consonant]:
        return [p for p in self.phones if isinstance(p, Consonant)]

    @property
    def tone(self) -> Tone:
        return self._tone

    def set_tone(self, tone: Tone) -> None:
        self._tone = tone.copy()

    # -- mutation -------------------------------------------------------

    def insert_onset(self, phone: Phone, position: int = -1) -> None:
        self._insert(self._onset, phone, position)

    def insert_nucleus(self, phone: Phone, position: int = -1) -> None:
        self._insert(self._nucleus, phone, position)

    def insert_coda(self, phone: Phone, position: int = -1) -> None:
        self._insert(self._coda, phone, position)

    def remove_onset(self, index: int = -1) -> Phone:
        return self._onset.pop(resolve_index(index, len(self._onset)))

    def remove_nucleus(self, index: int = -1) -> Phone:
        resolved = resolve_index(index, len(self._nucleus))
        if len(self._nucleus) == 1:
            raise ImpossibleArticulation("A syllable nucleus cannot be empty")
        return self._nucleus.pop(resolved)

    def remove_coda(self, index: int = -1) -> Phone:
        return self._coda.pop(resolve_index(index, len(self._coda)))

    @staticmethod
    def _insert(part: list[Phone], phone: Phone, position: int) -> None:
        if not isinstance(phone, Phone):
            raise TypeError(f"Expected a phone, got {type(phone).__name__}")
        part.insert(resolve_insertion(position, len(part)), phone.copy())

    # -- sequence protocol ----------------------------------------------

    def __len__(self) -> int:
        return len(self._onset) + len(self._nucleus) + len(self._coda)

    def __getitem__(self, index: int) -> Phone:
        return self.phones[resolve_index(index, len(self))]

    def __iter__(self) -> Iterator[Phone]:
        return iter(self.phones)

    def __reversed__(self) -> Iterator[Phone]:
        return reversed(self.phones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Syllable):
            return NotImplemented
        return (
            self._onset == other._onset
            and self._nucleus == other._nucleus
            and self._coda == other._coda
            and self._tone == other._tone
        )

    __hash__ = None  # type: ignore[assignment]

    # -- rendering ------------------------------------------------------

    def encode(self, notation: Any = "ipa") -> str:
        """Transcribe this syllable.

        Raises:
            EncodingFailed: If a feature combination has no symbol.
        """
        from phonetix.transcription.encoder import encode

        return encode(self, notation)

    def unicode(self) -> str:
        """IPA transcription in Unicode."""
        return self.encode("ipa")

    def kirschenbaum(self) -> str:
        return self.encode("kirschenbaum")

    def x_sampa(self) -> str:
        return self.encode("x-sampa")

    def description(self) -> str:
        """One line per phone, grouped by syllable part."""
        lines = []
        for part, phones in (
            ("onset", self._onset),
            ("nucleus", self._nucleus),
            ("coda", self._coda),
        ):
            for phone in phones:
                lines.append(f"{part}: {phone.description()}")
        lines.append(f"tone: {' '.join(str(p) for p in self._tone)}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "onset": [p.to_dict() for p in self._onset],
            "nucleus": [p.to_dict() for p in self._nucleus],
            "coda": [p.to_dict() for p in self._coda],
            "tone": self._tone.to_list(),
        }

    def __repr__(self) -> str:
        return (
            f"Syllable(onset={len(self._onset)}, nucleus={len(self._nucleus)}, "
            f"coda={len(self._coda)}, tone={self._tone.pitches})"
        )
