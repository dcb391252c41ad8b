"""Data models for taxonomy entries and location matches."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple, Dict, Any


class Granularity(Enum):
    """Taxonomy level a name or match refers to."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    
    @property
    def rank(self) -> int:
        return _GRANULARITY_RANK[self]
    
    @property
    def base_confidence(self) -> float:
        return _BASE_CONFIDENCE[self]


_GRANULARITY_RANK = {
    Granularity.PRIMARY: 1,
    Granularity.SECONDARY: 2,
    Granularity.TERTIARY: 3,
}

_BASE_CONFIDENCE = {
    Granularity.PRIMARY: 0.85,
    Granularity.SECONDARY: 0.90,
    Granularity.TERTIARY: 0.95,
}


class MatchTier(Enum):
    """How a search query matched a name."""
    PREFIX = "prefix"
    SUBSTRING = "substring"
    ALL_WORDS = "all_words"


@dataclass(frozen=True)
class LocationEntry:
    """One record of the region > district > sub-area taxonomy."""
    primary: str
    secondary: str
    tertiary: Optional[str] = None
    
    def names(self) -> List[Tuple[str, Granularity]]:
        """Present names, most specific first."""
        names = []
        if self.tertiary:
            names.append((self.tertiary, Granularity.TERTIARY))
        names.append((self.secondary, Granularity.SECONDARY))
        names.append((self.primary, Granularity.PRIMARY))
        return names
    
    @property
    def display(self) -> str:
        return self.tertiary or self.secondary
    
    @property
    def key(self) -> str:
        """Composite identity used to deduplicate results."""
        return f"{self.primary}|{self.secondary}|{self.tertiary or ''}"
    
    def path(self, granularity: Granularity) -> Tuple[str, ...]:
        """Names from the region down to the given level."""
        full = (self.primary, self.secondary, self.tertiary or "")
        return full[:granularity.rank]
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "tertiary": self.tertiary,
        }


@dataclass(frozen=True)
class IndexEntry:
    """Match record stored under a normalized key of the location index."""
    key: str
    primary: str
    secondary: str
    tertiary: Optional[str]
    granularity: Granularity
    display: str
    confidence: float
    alias: Optional[str] = None
    
    @property
    def location(self) -> LocationEntry:
        return LocationEntry(self.primary, self.secondary, self.tertiary)
    
    @property
    def name(self) -> str:
        """Canonical name at the matched level."""
        return self.location.path(self.granularity)[-1]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "key": self.key,
            "primary": self.primary,
            "secondary": self.secondary,
            "tertiary": self.tertiary,
            "granularity": self.granularity.value,
            "display": self.display,
            "confidence": self.confidence,
            "alias": self.alias,
        }


@dataclass(frozen=True)
class SearchResult:
    """Ranked candidate returned by relevance search."""
    primary: str
    secondary: str
    tertiary: Optional[str]
    granularity: Granularity
    display: str
    score: float
    tier: MatchTier
    
    @property
    def location(self) -> LocationEntry:
        return LocationEntry(self.primary, self.secondary, self.tertiary)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "tertiary": self.tertiary,
            "granularity": self.granularity.value,
            "display": self.display,
            "score": self.score,
            "tier": self.tier.value,
        }
