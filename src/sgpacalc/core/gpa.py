from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping, Optional

from sgpacalc.core.grades import GRADE_POINTS, is_countable_credit, parse_credits, to_grade_point
from sgpacalc.core.table import CourseRow

NO_VALID_ROWS_MESSAGE = "Please enter valid credits and select a grade for at least one course."


@dataclass(frozen=True)
class SgpaResult:
    sgpa: Optional[str] = None
    error: Optional[str] = None
    total_credits: float = 0.0
    total_grade_points: float = 0.0

    @property
    def ok(self) -> bool:
        return self.sgpa is not None


def format_sgpa(value: float, places: int = 2) -> str:
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_sgpa(
    rows: Iterable[CourseRow],
    grade_points: Mapping[str, float] = GRADE_POINTS,
) -> SgpaResult:
    """
    rows: course rows as typed into the form
    SGPA = Σ(credits * grade_point) / Σ(credits), over complete rows only

    Rows with unparseable, zero or negative credits, or without a grade,
    are skipped rather than reported.
    """
    total_grade_points = 0.0
    total_credits = 0.0
    any_valid = False

    for row in rows:
        credit = parse_credits(row.credits)
        if not is_countable_credit(credit) or not row.grade:
            continue
        total_grade_points += credit * to_grade_point(row.grade, grade_points)
        total_credits += credit
        any_valid = True

    # Huge credits can overflow the sums; no finite average exists then.
    if not any_valid or not (math.isfinite(total_grade_points) and math.isfinite(total_credits)):
        return SgpaResult(error=NO_VALID_ROWS_MESSAGE)

    return SgpaResult(
        sgpa=format_sgpa(total_grade_points / total_credits),
        total_credits=total_credits,
        total_grade_points=total_grade_points,
    )
