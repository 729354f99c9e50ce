"""Conversion between syllables and IPA, Kirschenbaum or X-SAMPA text."""

from phonetix.transcription.decoder import decode
from phonetix.transcription.encoder import encode
from phonetix.transcription.notation import Notation
from phonetix.transcription.table import SymbolTable, symbol_table

__all__ = ["Notation", "SymbolTable", "decode", "encode", "symbol_table"]
