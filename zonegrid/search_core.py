from __future__ import annotations
from typing import Iterable, List

from .catalog import TimeZone
from .utils import normalize


def zone_matches(name: str, normalized_query: str) -> bool:
    return normalized_query in normalize(name)

def filter_zones(query: str, catalog: Iterable[TimeZone]) -> List[TimeZone]:
    """Every zone whose normalized name contains the normalized query, in catalog order.

    No cap and no ranking; the menu decides how many it shows.
    """
    q = normalize(query)
    if not q:
        return list(catalog)
    return [z for z in catalog if zone_matches(z.name, q)]
