from .workers import ClockWorker

__all__ = [
    "ClockWorker",
]
