"""Exceptions raised while compiling a taxonomy into a location index."""
from typing import Any


class TaxonomyError(ValueError):
    """Base class for taxonomy data problems."""


class TaxonomyLoadError(TaxonomyError):
    """A taxonomy source could not be read."""


class HierarchyViolationError(TaxonomyError):
    """One or more entries break the region > district > sub-area hierarchy."""
    
    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class KeyCollisionError(TaxonomyError):
    """Two unrelated names normalize to the same index key."""
    
    def __init__(self, key: str, existing: Any, incoming: Any):
        self.key = key
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Index key '{key}' already names {existing.name} "
            f"({existing.granularity.value}); refusing to overwrite with "
            f"{incoming.name} ({incoming.granularity.value})"
        )
