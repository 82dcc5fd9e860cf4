# shedr/services/suburbs.py

# Suburb lookup for the search box: case-insensitive substring match on the name,
# input order kept, capped at `limit`. A blank term matches nothing.

from __future__ import annotations
from typing import Iterable, List

from shedr.utils.sessions import Suburb


def search_suburbs(suburbs: Iterable[Suburb], term: str, limit: int = 5) -> List[Suburb]:
    needle = (term or "").strip().lower()
    if not needle or limit <= 0:
        return []
    out: List[Suburb] = []
    for sub in suburbs:
        if needle in sub.name.lower():
            out.append(sub)
            if len(out) == limit:
                break
    return out
