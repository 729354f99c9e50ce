"""Per-notation view of the shared symbol inventory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from phonetix.errors import DecodingFailed
from phonetix.features.categories import Manner, Mechanism, Pitch, Place
from phonetix.transcription.notation import Notation
from phonetix.transcription.symbols import (
    CONSONANT_LETTERS,
    MARK_SYMBOLS,
    TONE_SYMBOLS,
    VARIANTS,
    VOWEL_LETTERS,
    ConsonantLetter,
    Mark,
    VowelLetter,
)

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    CONSONANT = "consonant"
    VOWEL = "vowel"
    MARK = "mark"
    TONE = "tone"


TokenValue = Union[ConsonantLetter, VowelLetter, Mark, Pitch]


@dataclass(frozen=True)
class Token:
    """One scanned symbol and where it started in the input."""

    kind: TokenKind
    value: Any
    text: str
    position: int


LetterKey = tuple[Manner, Place, Mechanism, Union[Place, None]]


class SymbolTable:
    """Symbols of one notation, indexed for scanning and encoding.

    Raises:
        ValueError: If two rows of the inventory claim the same token.
    """

    def __init__(self, notation: Notation) -> None:
        self.notation = notation
        self._tokens: dict[str, tuple[TokenKind, TokenValue]] = {}
        self._consonants: dict[LetterKey, dict[bool, ConsonantLetter]] = {}
        self._vowels: list[VowelLetter] = []

        for letter in CONSONANT_LETTERS:
            text = letter.symbols.get(notation)
            if text is None:
                continue
            self._add(text, TokenKind.CONSONANT, letter)
            key = (letter.manner, letter.place, letter.mechanism, letter.secondary)
            self._consonants.setdefault(key, {})[letter.voiced] = letter
        for vowel in VOWEL_LETTERS:
            text = vowel.symbols.get(notation)
            if text is None:
                continue
            self._add(text, TokenKind.VOWEL, vowel)
            self._vowels.append(vowel)
        for mark, symbols in MARK_SYMBOLS.items():
            if notation in symbols:
                self._add(symbols[notation], TokenKind.MARK, mark)
        for pitch, symbols in TONE_SYMBOLS.items():
            self._add(symbols[notation], TokenKind.TONE, pitch)
        for variant, canonical in VARIANTS[notation].items():
            self._add(variant, *self._tokens[canonical])

        self._max_token = max(len(t) for t in self._tokens)
        logger.debug(
            "Built %s symbol table: %d tokens, %d consonant letters, %d vowel letters",
            notation.value,
            len(self._tokens),
            sum(len(v) for v in self._consonants.values()),
            len(self._vowels),
        )

    def _add(self, text: str, kind: TokenKind, value: TokenValue) -> None:
        existing = self._tokens.get(text)
        if existing is not None and existing != (kind, value):
            raise ValueError(
                f"{self.notation.value}: token {text!r} is claimed by both "
                f"{existing[1]!r} and {value!r}"
            )
        self._tokens[text] = (kind, value)

    # -- decoding -------------------------------------------------------

    def starts_symbol(self, char: str) -> bool:
        """Whether some token of this notation begins with ``char``."""
        return any(token.startswith(char) for token in self._tokens)

    def tokenize(self, text: str, offset: int = 0) -> list[Token]:
        """Split ``text`` into tokens, longest match first.

        Args:
            text: Text to scan.
            offset: Added to every reported position.

        Raises:
            DecodingFailed: At the first position where no token matches.
        """
        tokens: list[Token] = []
        pos = 0
        while pos < len(text):
            for size in range(min(self._max_token, len(text) - pos), 0, -1):
                chunk = text[pos:pos + size]
                entry = self._tokens.get(chunk)
                if entry is not None:
                    tokens.append(Token(entry[0], entry[1], chunk, pos + offset))
                    pos += size
                    break
            else:
                raise DecodingFailed(
                    f"Unknown {self.notation.value} symbol {text[pos]!r} "
                    f"at position {pos + offset}",
                    position=pos + offset,
                )
        return tokens

    # -- encoding -------------------------------------------------------

    def consonant_letters(
        self,
        manner: Manner,
        place: Place,
        mechanism: Mechanism,
        secondary: Place | None = None,
    ) -> dict[bool, ConsonantLetter]:
        """Letters for a cell, keyed by voicing; empty when there are none."""
        return self._consonants.get((manner, place, mechanism, secondary), {})

    @property
    def vowel_letters(self) -> tuple[VowelLetter, ...]:
        return tuple(self._vowels)

    def letter(self, letter: ConsonantLetter | VowelLetter) -> str:
        return letter.symbols[self.notation]

    def mark(self, mark: Mark) -> str | None:
        """Symbol for a mark, or None when this notation lacks one."""
        return MARK_SYMBOLS[mark].get(self.notation)

    def tone(self, pitch: Pitch) -> str:
        return TONE_SYMBOLS[pitch][self.notation]


@lru_cache(maxsize=None)
def symbol_table(notation: Notation) -> SymbolTable:
    """Shared, lazily built table for ``notation``."""
    return SymbolTable(notation)
