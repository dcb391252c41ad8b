"""Ranked location suggestions for autocomplete."""
from typing import Dict, List, Optional, Sequence, Tuple
from location_engine.core.config import SEARCH_LIMIT
from location_engine.core.models import Granularity, LocationEntry, MatchTier, SearchResult
from location_engine.core.normalization import normalize_text
from location_engine.core.taxonomy import get_taxonomy


SCORE_TABLE: Dict[Tuple[MatchTier, Granularity], float] = {
    (MatchTier.PREFIX, Granularity.TERTIARY): 1.00,
    (MatchTier.PREFIX, Granularity.SECONDARY): 0.95,
    (MatchTier.PREFIX, Granularity.PRIMARY): 0.90,
    (MatchTier.SUBSTRING, Granularity.TERTIARY): 0.65,
    (MatchTier.SUBSTRING, Granularity.SECONDARY): 0.60,
    (MatchTier.SUBSTRING, Granularity.PRIMARY): 0.55,
    (MatchTier.ALL_WORDS, Granularity.TERTIARY): 0.45,
    (MatchTier.ALL_WORDS, Granularity.SECONDARY): 0.40,
    (MatchTier.ALL_WORDS, Granularity.PRIMARY): 0.35,
}


def classify_match(name: str, query: str, words: Sequence[str]) -> Optional[MatchTier]:
    """
    Decide how well a normalized name matches a normalized query.
    
    Returns the strongest tier that applies, or None.
    """
    if name.startswith(query):
        return MatchTier.PREFIX
    if query in name:
        return MatchTier.SUBSTRING
    if words and all(word in name for word in words):
        return MatchTier.ALL_WORDS
    return None


def _best_for_entry(
    location: LocationEntry,
    query: str,
    words: Sequence[str]
) -> Optional[SearchResult]:
    # First matching level wins, most specific first
    for name, granularity in location.names():
        tier = classify_match(normalize_text(name), query, words)
        if tier is None:
            continue
        return SearchResult(
            primary=location.primary,
            secondary=location.secondary,
            tertiary=location.tertiary,
            granularity=granularity,
            display=location.display,
            score=SCORE_TABLE[(tier, granularity)],
            tier=tier,
        )
    return None


def search_locations(
    query: str,
    limit: Optional[int] = None,
    entries: Optional[Sequence[LocationEntry]] = None
) -> List[SearchResult]:
    """
    Rank taxonomy entries against a partial query.
    
    Prefix matches outrank substring matches, which outrank matches where
    every query word appears somewhere in the name. Each entry contributes at
    most one result.
    
    Args:
        query: Raw text typed so far
        limit: Maximum number of results (defaults to SEARCH_LIMIT)
        entries: Taxonomy to search (defaults to the process-wide taxonomy)
        
    Returns:
        Results sorted by descending score, ties in taxonomy order
    """
    if limit is None:
        limit = SEARCH_LIMIT
    if not query or not query.strip() or limit <= 0:
        return []
    
    normalized = normalize_text(query)
    if not normalized:
        return []
    words = normalized.split()
    
    if entries is None:
        entries = get_taxonomy()
    
    results = []
    seen = set()
    for location in entries:
        if location.key in seen:
            continue
        result = _best_for_entry(location, normalized, words)
        if result is None:
            continue
        seen.add(location.key)
        results.append(result)
    
    # sorted() is stable, so equal scores keep taxonomy order
    results = sorted(results, key=lambda r: r.score, reverse=True)
    return results[:limit]
