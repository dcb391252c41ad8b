"""Location resolution engine for free-form Hong Kong location text.

Resolves user-typed text to a region > district > sub-area reference, either
as a single best match for routing or as ranked suggestions for autocomplete.
"""

from location_engine.core.matcher import match_location
from location_engine.core.search import search_locations
from location_engine.core.taxonomy import (
    get_primaries,
    get_secondaries_for_primary,
    get_tertiaries_for_pair,
)

__all__ = [
    "match_location",
    "search_locations",
    "get_primaries",
    "get_secondaries_for_primary",
    "get_tertiaries_for_pair",
]
