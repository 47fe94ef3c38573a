from __future__ import annotations
import logging
import sys

from .config import get_log_level


def _configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    _configure_logging()

    from PyQt6.QtWidgets import QApplication
    from .main_ui import ZoneGridUI

    app = QApplication(sys.argv)
    app.setApplicationName("ZoneGrid")
    ui = ZoneGridUI()  # noqa: F841
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
