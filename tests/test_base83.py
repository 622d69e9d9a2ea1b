"""Tests for base83 digits."""

import pytest
from engines.base83 import encode_base83, decode_base83
from utils.constants import BASE83_ALPHABET


def test_alphabet():
    assert len(BASE83_ALPHABET) == 83
    assert len(set(BASE83_ALPHABET)) == 83
    assert BASE83_ALPHABET[0] == '0'
    assert BASE83_ALPHABET[10] == 'A'
    assert BASE83_ALPHABET[36] == 'a'
    assert BASE83_ALPHABET[62:] == '#$%*+,-.:;=?@[]^_{|}~'


def test_encode_boundaries():
    assert encode_base83(0, 1) == "0"
    assert encode_base83(82, 1) == "~"
    assert encode_base83(83, 2) == "10"
    assert encode_base83(0, 4) == "0000"
    assert encode_base83(83 ** 4 - 1, 4) == "~~~~"


def test_encode_center_ac():
    assert encode_base83(3429, 2) == "fQ"


def test_encode_out_of_range_wraps():
    assert encode_base83(83, 1) == "0"
    assert encode_base83(83 ** 2 + 5, 2) == "05"


def test_encode_negative_rejected():
    with pytest.raises(ValueError):
        encode_base83(-1, 2)


def test_decode():
    assert decode_base83("10") == 83
    assert decode_base83("~") == 82
    assert decode_base83("fQ") == 3429
    assert decode_base83(encode_base83(12369084, 4)) == 12369084


def test_decode_invalid_character():
    with pytest.raises(ValueError):
        decode_base83("a!")
