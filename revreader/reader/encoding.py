"""Encoding helpers shared by the reader and its helpers."""

import codecs

from ..errors import InvalidArgumentError


def normalize_encoding(encoding: str) -> str:
    """
    Validate an encoding name and return its canonical codec name.

    Args:
        encoding: Codec name such as "utf-8" or "utf-16-le"

    Returns:
        Canonical codec name as reported by the codec registry

    Raises:
        InvalidArgumentError: If the encoding is missing or unknown
    """
    if not encoding:
        raise InvalidArgumentError("encoding is required")

    try:
        info = codecs.lookup(encoding)
    except LookupError as e:
        raise InvalidArgumentError(f"Unknown encoding: {encoding}") from e

    # Text codecs only; bytes-to-bytes codecs like "base64" cannot decode records
    try:
        "\n".encode(info.name)
    except LookupError as e:
        raise InvalidArgumentError(f"Not a text encoding: {encoding}") from e

    return info.name


def validate_errors(errors: str) -> str:
    """Return ``errors`` if it names a registered codec error handler."""
    try:
        codecs.lookup_error(errors)
    except (LookupError, TypeError) as e:
        raise InvalidArgumentError(f"Unknown error handler: {errors!r}") from e
    return errors


def encode_without_bom(text: str, encoding: str) -> bytes:
    """
    Encode text without the byte-order mark some codecs prepend.

    "utf-16", "utf-32" and "utf-8-sig" emit a BOM on every ``encode`` call,
    which would never match a delimiter in the middle of a file.
    """
    data = text.encode(encoding)
    bom = "".encode(encoding)
    if bom and data.startswith(bom):
        data = data[len(bom):]
    return data


def comparison_unit(encoding: str) -> int:
    """Byte stride used for delimiter scanning: the encoded width of a line feed."""
    return len(encode_without_bom("\n", encoding))
