"""Parsing of raw address text into lookup inputs."""

from .address import split_address
from .house_number import is_numeric_key, normalize_house_number, parse_numeric_key

__all__ = [
    "split_address",
    "parse_numeric_key",
    "normalize_house_number",
    "is_numeric_key",
]
