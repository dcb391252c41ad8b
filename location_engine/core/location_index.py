"""Immutable lookup index from normalized names and aliases to match records."""
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple
from location_engine.core.aliases import NAME_ALIASES, lookup_aliases
from location_engine.core.config import STRICT_INDEX
from location_engine.core.errors import KeyCollisionError
from location_engine.core.models import Granularity, IndexEntry, LocationEntry
from location_engine.core.normalization import normalize_text
from location_engine.core.taxonomy import get_taxonomy
from location_engine.utils.logging import log_structured
from location_engine.utils.timing import Timer


ALIAS_CONFIDENCE_PENALTY = 0.05
MIN_CONFIDENCE = 0.80


def alias_confidence(base_confidence: float) -> float:
    """Confidence of a key derived from an alias rather than the canonical name."""
    return round(max(base_confidence - ALIAS_CONFIDENCE_PENALTY, MIN_CONFIDENCE), 2)


class LocationIndex:
    """
    Read-only mapping from normalized key to IndexEntry.
    
    Use ``LocationIndex.build`` to compile one from a taxonomy and an alias
    table. Keys registered later replace earlier ones; replacing a key that
    named a different place or level is counted as a collision.
    """
    
    def __init__(self, entries: Mapping[str, IndexEntry], collisions: int = 0):
        self._entries = MappingProxyType(dict(entries))
        self.collisions = collisions
    
    @classmethod
    def build(
        cls,
        locations: Sequence[LocationEntry],
        aliases: Mapping[str, Sequence[str]] = NAME_ALIASES,
        strict: bool = False
    ) -> "LocationIndex":
        """
        Build the index from taxonomy entries and an alias table.
        
        Args:
            locations: Taxonomy entries, in registration order
            aliases: Canonical name -> synonyms
            strict: Raise KeyCollisionError instead of overwriting unrelated keys
            
        Returns:
            LocationIndex instance
        """
        builder = _IndexBuilder(strict)
        
        with Timer("build_location_index"):
            for location in locations:
                for name, granularity in location.names():
                    builder.register(normalize_text(name), location, granularity)
                    
                    for alias in lookup_aliases(name, aliases):
                        builder.register(normalize_text(alias), location, granularity, alias=alias)
        
        log_structured(
            "info",
            "Location index built",
            locations=len(locations),
            keys=len(builder.entries),
            alias_keys=sum(1 for entry in builder.entries.values() if entry.alias),
            collisions=builder.collisions
        )
        return cls(builder.entries, builder.collisions)
    
    def get(self, key: str) -> Optional[IndexEntry]:
        return self._entries.get(key)
    
    def items(self):
        return self._entries.items()
    
    def keys(self):
        return self._entries.keys()
    
    def __getitem__(self, key: str) -> IndexEntry:
        return self._entries[key]
    
    def __contains__(self, key) -> bool:
        return key in self._entries
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
    
    def __len__(self) -> int:
        return len(self._entries)


class _IndexBuilder:
    """Mutable state used only while an index is being compiled."""
    
    def __init__(self, strict: bool):
        self.strict = strict
        self.entries: Dict[str, IndexEntry] = {}
        self.collisions = 0
        # key -> (granularity, names from region down to that level)
        self._owners: Dict[str, Tuple[Granularity, Tuple[str, ...]]] = {}
    
    def register(
        self,
        key: str,
        location: LocationEntry,
        granularity: Granularity,
        alias: Optional[str] = None
    ):
        # An empty key would be a substring of every query
        if not key:
            return
        
        confidence = granularity.base_confidence
        if alias is not None:
            confidence = alias_confidence(confidence)
        
        entry = IndexEntry(
            key=key,
            primary=location.primary,
            secondary=location.secondary,
            tertiary=location.tertiary,
            granularity=granularity,
            display=location.display,
            confidence=confidence,
            alias=alias,
        )
        
        owner = (granularity, location.path(granularity))
        previous_owner = self._owners.get(key)
        if previous_owner is not None and previous_owner != owner:
            self._collide(key, entry)
        
        self._owners[key] = owner
        self.entries[key] = entry
    
    def _collide(self, key: str, incoming: IndexEntry):
        existing = self.entries[key]
        if self.strict:
            raise KeyCollisionError(key, existing, incoming)
        
        self.collisions += 1
        log_structured(
            "warning",
            "Index key collision, keeping the later entry",
            key=key,
            replaced=existing.to_dict(),
            replacement=incoming.to_dict()
        )


@lru_cache(maxsize=1)
def get_location_index() -> LocationIndex:
    """Process-wide index over the configured taxonomy, built on first use."""
    return LocationIndex.build(get_taxonomy(), NAME_ALIASES, strict=STRICT_INDEX)
