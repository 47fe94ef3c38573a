from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QThread, pyqtSignal

from ..clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class ClockWorker(QThread):
    """Asks the clock for the current instant once and reports it."""

    # object, not int: millisecond instants overflow a 32-bit signal argument
    time_ready = pyqtSignal(object)

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__()
        self.clock = clock or SystemClock()

    def run(self):
        instant = self.clock.now()
        logger.debug("Clock answered %d", instant)
        self.time_ready.emit(instant)
