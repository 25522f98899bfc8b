import logging
from dataclasses import dataclass, field
from typing import Optional

from sgpacalc.core.gpa import SgpaResult, calculate_sgpa
from sgpacalc.core.table import CourseRow, GradeTable, GradeTableError

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    table: GradeTable = field(default_factory=GradeTable)
    sgpa: Optional[str] = None
    error: Optional[str] = None

    @property
    def has_result(self) -> bool:
        return self.sgpa is not None and not self.error

    def set_field(self, row_index: int, field_name: str, value: Optional[str]) -> None:
        try:
            self.table.set_field(row_index, field_name, value)
        except GradeTableError as exc:
            logger.warning("Rejected edit: %s", exc)
            raise

    def append_row(self) -> CourseRow:
        return self.table.append_row()

    def calculate(self) -> SgpaResult:
        result = calculate_sgpa(self.table.rows())
        self.sgpa = result.sgpa
        self.error = result.error
        logger.debug(
            "Calculated over %d rows: sgpa=%s error=%s",
            len(self.table),
            result.sgpa,
            result.error,
        )
        return result
