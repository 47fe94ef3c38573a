from __future__ import annotations
from datetime import timedelta
from typing import Optional

# ----------------------- constants -----------------------
HOURS_PER_DAY = 24
MS_PER_HOUR = 3_600_000
MS_PER_SECOND = 1000


# ----------------------------- helpers ----------------------------
def normalize(s: str) -> str:
    """Lowercase and turn underscores into spaces; everything else is kept."""
    return s.lower().replace("_", " ")

def hour_label(hour: int) -> str: return f"{hour}:00"

def format_offset(offset: Optional[timedelta]) -> str:
    if offset is None: return "+00:00"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, rem = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{rem // 60:02d}"

def elide_middle(s: str, n: int) -> str:
    if len(s) <= n: return s
    half = (n - 1)//2
    return s[:half] + "…" + s[-half:]

def ensure_visible(idx: int, scroll: int, height: int, total: int) -> int:
    if total <= height:
        return 0
    if idx < scroll:
        return idx
    if idx >= scroll + height:
        return max(0, idx - height + 1)
    return max(0, min(scroll, total - height))
