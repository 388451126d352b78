"""Decoding of positional batchexecute payloads"""

from .path import ABSENT, value_at, get_str, get_int, get_float, get_array
from .review import Review, parse_review

__all__ = [
    "ABSENT",
    "value_at",
    "get_str",
    "get_int",
    "get_float",
    "get_array",
    "Review",
    "parse_review",
]
