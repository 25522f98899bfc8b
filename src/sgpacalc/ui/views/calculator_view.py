import flet as ft

from sgpacalc.core.grades import GRADE_LABELS
from sgpacalc.core.table import GradeTableError
from sgpacalc.state.calculator_state import CalculatorState


def build_calculator_view(page: ft.Page, state: CalculatorState) -> ft.View:
    rows_column = ft.Column(spacing=10)
    status = ft.Text(color=ft.Colors.RED_400)
    result_text = ft.Text(size=20, weight=ft.FontWeight.BOLD, visible=False)

    def on_edit(index: int, field_name: str):
        def handler(e: ft.ControlEvent) -> None:
            try:
                state.set_field(index, field_name, e.control.value)
            except GradeTableError as exc:
                status.value = str(exc)
                page.update()
                return
            if status.value != (state.error or ""):
                status.value = state.error or ""
                page.update()

        return handler

    def build_row(index: int, label: str) -> ft.Row:
        row = state.table[index]
        credits = ft.TextField(
            hint_text="Enter Credits",
            width=200,
            value=row.credits,
            keyboard_type=ft.KeyboardType.NUMBER,
            on_change=on_edit(index, "credits"),
        )
        grade = ft.Dropdown(
            hint_text="Select Grade",
            width=200,
            value=row.grade or None,
            options=[ft.dropdown.Option(g) for g in GRADE_LABELS],
            on_change=on_edit(index, "grade"),
        )
        return ft.Row(controls=[ft.Text(label, width=120), credits, grade])

    def render_rows() -> None:
        rows_column.controls = [build_row(i, label) for i, label in enumerate(state.table.labels())]

    def render_result() -> None:
        status.value = state.error or ""
        if state.has_result:
            result_text.value = f"Your GPA: {state.sgpa}"
            result_text.color = ft.Colors.GREEN_400
            result_text.visible = True
        else:
            result_text.value = ""
            result_text.visible = False

    def on_add_course(_):
        state.append_row()
        render_rows()
        page.update()

    def on_calculate(_):
        state.calculate()
        render_result()
        page.update()

    render_rows()
    render_result()

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(title=ft.Text("SGPA Calculator")),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Row(
                            controls=[
                                ft.Text("Course#", width=120, weight=ft.FontWeight.BOLD),
                                ft.Text("Credits", width=200, weight=ft.FontWeight.BOLD),
                                ft.Text("Grades", width=200, weight=ft.FontWeight.BOLD),
                            ]
                        ),
                        rows_column,
                        status,
                        ft.Row(
                            controls=[
                                ft.OutlinedButton("Add Course", on_click=on_add_course),
                                ft.Button("Calculate SGPA", on_click=on_calculate),
                            ]
                        ),
                        result_text,
                    ],
                ),
            ),
        ],
    )
