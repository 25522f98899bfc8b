from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List

FIELDS = ("credits", "grade")


class GradeTableError(Exception):
    pass


@dataclass
class CourseRow:
    credits: str = ""
    grade: str = ""


class GradeTable:
    """Ordered, append-only list of course rows. Never empty."""

    def __init__(self) -> None:
        self._rows: List[CourseRow] = [CourseRow()]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[CourseRow]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> CourseRow:
        return self._rows[self._check_index(index)]

    def rows(self) -> List[CourseRow]:
        return [replace(row) for row in self._rows]

    def labels(self) -> List[str]:
        return [f"Course {i + 1}" for i in range(len(self._rows))]

    def set_field(self, row_index: int, field_name: str, value: str | None) -> None:
        if field_name not in FIELDS:
            raise GradeTableError(f"Unknown field: {field_name}. Use credits or grade.")
        row = self._rows[self._check_index(row_index)]
        setattr(row, field_name, "" if value is None else value)

    def append_row(self) -> CourseRow:
        row = CourseRow()
        self._rows.append(row)
        return row

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise GradeTableError(f"Row index must be an integer, got {index!r}")
        if not 0 <= index < len(self._rows):
            raise GradeTableError(f"Row index {index} out of range (0-{len(self._rows) - 1})")
        return index
