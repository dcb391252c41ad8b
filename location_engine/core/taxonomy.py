"""Taxonomy loading, validation and cascading-selector projections."""
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple
import pandas as pd
from location_engine.core.config import TAXONOMY_CSV_PATH, STRICT_INDEX
from location_engine.core.errors import HierarchyViolationError, TaxonomyLoadError
from location_engine.core.locations import LOCATIONS
from location_engine.core.models import LocationEntry
from location_engine.utils.logging import log_error, log_structured
from location_engine.utils.timing import time_function


REQUIRED_COLUMNS = ["primary", "secondary"]


def _clean(value) -> Optional[str]:
    if pd.isna(value):
        return None
    value = str(value).strip()
    return value or None


@time_function
def load_taxonomy_from_csv(csv_path: Path) -> Tuple[LocationEntry, ...]:
    """
    Load a taxonomy from a CSV with ``primary``, ``secondary`` and optional ``tertiary`` columns.
    
    Row order is preserved; it decides which entry wins when two names share
    an index key.
    
    Args:
        csv_path: Path to the CSV file
        
    Returns:
        Tuple of LocationEntry records
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise TaxonomyLoadError(f"Taxonomy CSV not found: {csv_path}")
    
    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, na_values=[""])
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        log_error(e, {
            "module": "taxonomy",
            "function": "load_taxonomy_from_csv",
            "csv_path": str(csv_path)
        })
        raise TaxonomyLoadError(f"Taxonomy CSV {csv_path} could not be parsed: {e}") from e
    
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise TaxonomyLoadError(
            f"Taxonomy CSV {csv_path} is missing columns: {', '.join(missing)}"
        )
    
    has_tertiary = "tertiary" in df.columns
    entries = []
    for _, row in df.iterrows():
        entries.append(LocationEntry(
            primary=_clean(row["primary"]) or "",
            secondary=_clean(row["secondary"]) or "",
            tertiary=_clean(row["tertiary"]) if has_tertiary else None,
        ))
    
    log_structured(
        "info",
        "Loaded taxonomy from CSV",
        csv_path=str(csv_path),
        entries=len(entries)
    )
    return tuple(entries)


def validate_taxonomy(entries: Iterable[LocationEntry], strict: bool = False) -> List[str]:
    """
    Check entries against the region > district > sub-area invariants.
    
    Args:
        entries: Taxonomy entries
        strict: Raise HierarchyViolationError instead of returning problems
        
    Returns:
        List of human-readable problem descriptions (empty when valid)
    """
    problems = []
    seen = set()
    
    for position, entry in enumerate(entries):
        if not entry.primary:
            problems.append(f"entry {position} has no primary name")
        if not entry.secondary:
            problems.append(f"entry {position} has no secondary name")
        if entry.key in seen:
            problems.append(f"entry {position} duplicates {entry.key}")
        seen.add(entry.key)
    
    if problems and strict:
        raise HierarchyViolationError(problems)
    
    for problem in problems:
        log_structured("warning", "Taxonomy hierarchy violation", problem=problem)
    
    return problems


@lru_cache(maxsize=1)
def get_taxonomy() -> Tuple[LocationEntry, ...]:
    """Process-wide taxonomy: the configured CSV, or the bundled dataset."""
    if TAXONOMY_CSV_PATH is not None:
        entries = load_taxonomy_from_csv(TAXONOMY_CSV_PATH)
    else:
        entries = LOCATIONS
    validate_taxonomy(entries, strict=STRICT_INDEX)
    return entries


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def get_primaries(entries: Optional[Sequence[LocationEntry]] = None) -> List[str]:
    """Get all distinct region names."""
    if entries is None:
        entries = get_taxonomy()
    return _unique(entry.primary for entry in entries)


def get_secondaries_for_primary(
    primary: str,
    entries: Optional[Sequence[LocationEntry]] = None
) -> List[str]:
    """Get the distinct district names within a region."""
    if entries is None:
        entries = get_taxonomy()
    return _unique(entry.secondary for entry in entries if entry.primary == primary)


def get_tertiaries_for_pair(
    primary: str,
    secondary: str,
    entries: Optional[Sequence[LocationEntry]] = None
) -> List[str]:
    """Get the distinct sub-area names within a region and district."""
    if entries is None:
        entries = get_taxonomy()
    return _unique(
        entry.tertiary
        for entry in entries
        if entry.primary == primary and entry.secondary == secondary and entry.tertiary
    )
