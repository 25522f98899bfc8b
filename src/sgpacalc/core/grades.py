import math
import re
from types import MappingProxyType
from typing import Mapping, Tuple, Union


GRADE_POINTS: Mapping[str, float] = MappingProxyType(
    {
        "EX": 10.0,
        "AA": 9.0,
        "AB": 8.5,
        "BB": 8.0,
        "BC": 7.5,
        "CC": 7.0,
        "CD": 6.5,
        "DD": 6.0,
        "DE": 5.5,
        "EE": 5.0,
        "FF": 0.0,
    }
)

GRADE_LABELS: Tuple[str, ...] = tuple(GRADE_POINTS)

# Leading numeric prefix: "4.5cr" -> 4.5, "  3" -> 3, "abc" -> nan
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def parse_credits(raw: Union[str, float, int, None]) -> float:
    """
    Tolerant credit parser.

    Reads the longest numeric prefix of the text and ignores the rest;
    text with no numeric prefix (including "") yields NaN.
    """
    if raw is None:
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)

    match = _NUMERIC_PREFIX.match(raw.lstrip())
    if not match:
        return math.nan
    return float(match.group(0))


def is_countable_credit(credit: float) -> bool:
    return math.isfinite(credit) and credit > 0


def to_grade_point(label: str, grade_points: Mapping[str, float] = GRADE_POINTS) -> float:
    try:
        return grade_points[label]
    except KeyError as exc:
        raise ValueError(f"Unsupported grade label: {label}") from exc
