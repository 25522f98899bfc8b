import logging

import flet as ft

from sgpacalc.config.settings import settings
from sgpacalc.state.calculator_state import CalculatorState
from sgpacalc.ui.views.calculator_view import build_calculator_view

logger = logging.getLogger(__name__)


def setup_logging(level: str = settings.log_level) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def main(page: ft.Page) -> None:
    page.title = settings.title
    page.views.clear()
    # One state per session; nothing outlives the page.
    page.views.append(build_calculator_view(page, CalculatorState()))
    page.update()
    logger.info("Opened calculator session")


def run() -> None:
    setup_logging()
    logger.info("Starting %s (web=%s, port=%d)", settings.title, settings.web_mode, settings.port)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
