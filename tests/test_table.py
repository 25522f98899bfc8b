import unittest

from sgpacalc.core.table import CourseRow, GradeTable, GradeTableError


class GradeTableTests(unittest.TestCase):
    def test_starts_with_one_empty_row(self):
        table = GradeTable()
        self.assertEqual(len(table), 1)
        self.assertEqual(table[0], CourseRow("", ""))
        self.assertEqual(table.labels(), ["Course 1"])

    def test_append_row(self):
        table = GradeTable()
        table.set_field(0, "credits", "4")
        table.set_field(0, "grade", "AA")
        before = table.rows()

        table.append_row()

        self.assertEqual(len(table), 2)
        self.assertEqual(table.rows()[:1], before)
        self.assertEqual(table[1], CourseRow())
        self.assertEqual(table.labels(), ["Course 1", "Course 2"])

    def test_set_field_only_touches_one_field(self):
        table = GradeTable()
        table.append_row()
        table.set_field(0, "credits", "3")
        table.set_field(1, "grade", "BB")
        self.assertEqual(table.rows(), [CourseRow("3", ""), CourseRow("", "BB")])

    def test_set_field_none_clears(self):
        table = GradeTable()
        table.set_field(0, "grade", "CC")
        table.set_field(0, "grade", None)
        self.assertEqual(table[0].grade, "")

    def test_out_of_range_index(self):
        table = GradeTable()
        for index in (1, -1, 5):
            with self.subTest(index=index):
                with self.assertRaises(GradeTableError):
                    table.set_field(index, "credits", "3")
        self.assertEqual(table.rows(), [CourseRow()])

    def test_non_integer_index(self):
        table = GradeTable()
        with self.assertRaises(GradeTableError):
            table.set_field("0", "credits", "3")
        with self.assertRaises(GradeTableError):
            table.set_field(True, "credits", "3")

    def test_unknown_field(self):
        table = GradeTable()
        with self.assertRaises(GradeTableError):
            table.set_field(0, "name", "Maths")

    def test_rows_is_a_snapshot(self):
        table = GradeTable()
        snapshot = table.rows()
        table.set_field(0, "credits", "4")
        self.assertEqual(snapshot[0].credits, "")


if __name__ == "__main__":
    unittest.main()
