"""Best single location match for routing free text to one place."""
from typing import Optional
from location_engine.core.location_index import LocationIndex, get_location_index
from location_engine.core.models import IndexEntry
from location_engine.core.normalization import normalize_text


def _outranks(candidate: IndexEntry, best: IndexEntry) -> bool:
    """More specific level wins; on a tie, the longer display name wins."""
    if candidate.granularity.rank != best.granularity.rank:
        return candidate.granularity.rank > best.granularity.rank
    return len(normalize_text(candidate.display)) > len(normalize_text(best.display))


def match_location(query: str, index: Optional[LocationIndex] = None) -> Optional[IndexEntry]:
    """
    Resolve free text to the single most specific known location it mentions.
    
    Every index key contained in the normalized query is a candidate, e.g.
    "looking for a plumber near mk" contains the alias key "mk" for Mong Kok.
    
    Args:
        query: Raw user text
        index: Index to search (defaults to the process-wide index)
        
    Returns:
        Winning IndexEntry, or None when no known name occurs in the query
    """
    if index is None:
        index = get_location_index()
    
    normalized = normalize_text(query)
    if not normalized:
        return None
    
    best = None
    for key, entry in index.items():
        if key not in normalized:
            continue
        if best is None or _outranks(entry, best):
            best = entry
    
    return best
