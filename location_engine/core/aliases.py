"""Curated informal synonyms for canonical location names."""
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple
from location_engine.core.normalization import normalize_text


# Keys are canonical names as written by the data owner; lookups try the
# normalized form first.
#
# Matching is by substring, so very short aliases also fire inside ordinary
# words: "db" in "feedback", "nt" in "want", "np" in "input". Review any new
# alias of two or three letters against common vocabulary before adding it.
NAME_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "hong kong island": ("hk island", "hki"),
    "tsim sha tsui": ("tst",),
    "discovery bay": ("db",),
    "chek lap kok (hong kong international airport)": ("airport", "hkg", "chek lap kok"),
    "lohas park": ("lohas",),
    "jardine's lookout": ("jardines lookout",),
    "robin’s nest": ("robins nest",),
    "mai po / nam sang wai": ("mai po", "nam sang wai"),
    "mong kok": ("mk",),
    "wan chai": ("wch", "wanchai"),
    "north point": ("np",),
    "causeway bay": ("cwb",),
    "kowloon": ("kln",),
    "new territories": ("nt",),
})


def lookup_aliases(
    name: str,
    table: Mapping[str, Sequence[str]] = NAME_ALIASES
) -> Tuple[str, ...]:
    """
    Find the synonyms registered for a canonical name.
    
    The normalized name is tried first, then the raw name and its lower-cased
    form, so table keys may keep punctuation such as "/" or curly apostrophes.
    """
    for candidate in (normalize_text(name), name, name.lower()):
        aliases = table.get(candidate)
        if aliases:
            return tuple(aliases)
    return ()
