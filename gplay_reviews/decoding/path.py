"""
Positional path access into schema-free JSON arrays

batchexecute responses carry no keys: a field is identified only by where it
sits in a tree of nested lists. A path such as ``"7.2.0"`` means index 7 of
the root, then index 2 of that list, then index 0 of that list.
"""
import json
import math
from typing import Any, List, Sequence, Tuple, Union

Path = Union[str, Sequence[int]]


class _Absent:
    """Marker for a path that does not resolve to a value"""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __bool__(self) -> bool:
        return False
    
    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def _split_path(path: Path) -> Tuple[int, ...]:
    if isinstance(path, str):
        if path == "":
            return ()
        try:
            return tuple(int(part) for part in path.split("."))
        except ValueError:
            raise ValueError(f"Invalid path {path!r}: segments must be integers") from None
    return tuple(path)


def value_at(root: Any, path: Path) -> Any:
    """
    Resolve a positional path against a nested JSON value
    
    Args:
        root: Parsed JSON value (usually a list)
        path: Dotted string of indices or a sequence of ints
    
    Returns:
        The value at the path, or ABSENT when any step leaves the tree
        (intermediate value is not a list, or index out of range)
    """
    current = root
    for index in _split_path(path):
        if not isinstance(current, list) or index < 0 or index >= len(current):
            return ABSENT
        current = current[index]
    return current


def get_str(root: Any, path: Path) -> str:
    """Resolve a path as text; absent or null gives an empty string"""
    value = value_at(root, path)
    if value is ABSENT or value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _to_number(value: Any) -> float:
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            try:
                return float(value.strip())
            except ValueError:
                return 0
    return 0


def get_int(root: Any, path: Path) -> int:
    """Resolve a path as an integer; absent or non-numeric gives 0"""
    number = _to_number(value_at(root, path))
    if isinstance(number, float):
        if not math.isfinite(number):
            return 0
        return int(number)
    return int(number)


def get_float(root: Any, path: Path) -> float:
    """Resolve a path as a float; absent or non-numeric gives 0.0"""
    number = float(_to_number(value_at(root, path)))
    return number if math.isfinite(number) else 0.0


def get_array(root: Any, path: Path) -> List[Any]:
    """Resolve a path as a list for further lookups; anything else gives []"""
    value = value_at(root, path)
    if isinstance(value, list):
        return value
    return []
