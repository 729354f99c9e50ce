"""phonetix: articulatory phone model with IPA, Kirschenbaum and X-SAMPA transcription."""

__version__ = "0.1.0"

from phonetix.errors import (
    DecodingFailed,
    EncodingFailed,
    ImpossibleArticulation,
    IndexOutOfRange,
    InvalidFeatureValue,
    PhoneticsError,
    PhoneticValueError,
)
from phonetix.features import Consonant, Syllable, Tone, Vowel
from phonetix.transcription import Notation, decode, encode


def convert(text: str, source: Notation | str, target: Notation | str) -> str:
    """Re-transcribe one syllable from one notation into another.

    Args:
        text: Transcription in the ``source`` notation.
        source: Notation of ``text``.
        target: Notation to produce.

    Raises:
        DecodingFailed: If ``text`` cannot be decoded.
        EncodingFailed: If the syllable has no spelling in ``target``.
    """
    return encode(decode(text, source), target)


__all__ = [
    "Consonant",
    "DecodingFailed",
    "EncodingFailed",
    "ImpossibleArticulation",
    "IndexOutOfRange",
    "InvalidFeatureValue",
    "Notation",
    "PhoneticValueError",
    "PhoneticsError",
    "Syllable",
    "Tone",
    "Vowel",
    "__version__",
    "convert",
    "decode",
    "encode",
]
