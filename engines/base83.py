"""Base83 fixed-width digit encoding."""

from utils.constants import BASE83_ALPHABET

_DIGIT_VALUES = {char: index for index, char in enumerate(BASE83_ALPHABET)}


def encode_base83(value: int, length: int) -> str:
    """
    Encode value as exactly `length` base83 digits, most significant first.

    Values of 83**length or more wrap; only the low digits are kept.
    """
    if value < 0:
        raise ValueError(f"Cannot base83-encode negative value {value}")
    return ''.join(
        BASE83_ALPHABET[(value // 83 ** (length - i)) % 83]
        for i in range(1, length + 1)
    )


def decode_base83(text: str) -> int:
    """Decode a base83 digit string."""
    value = 0
    for char in text:
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            raise ValueError(f"Invalid base83 character: {char!r}")
        value = value * 83 + digit
    return value
