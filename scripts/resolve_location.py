#!/usr/bin/env python3
"""CLI script to resolve location text against the taxonomy."""
import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from location_engine.core.aliases import NAME_ALIASES
from location_engine.core.config import LOG_LEVEL, STRICT_INDEX
from location_engine.core.errors import TaxonomyError
from location_engine.core.location_index import LocationIndex, get_location_index
from location_engine.core.matcher import match_location
from location_engine.core.search import search_locations
from location_engine.core.taxonomy import (
    get_primaries,
    get_secondaries_for_primary,
    get_taxonomy,
    get_tertiaries_for_pair,
    load_taxonomy_from_csv,
    validate_taxonomy,
)
from location_engine.utils.logging import log_error, setup_logging


def _print_match(match, as_json: bool):
    if match is None:
        print("null" if as_json else "No location found")
    elif as_json:
        print(json.dumps(match.to_dict(), ensure_ascii=False))
    else:
        print(f"{match.display} ({match.granularity.value}): "
              f"{match.primary} > {match.secondary}"
              f"{' > ' + match.tertiary if match.tertiary else ''} "
              f"[confidence {match.confidence:.2f}]")


def _print_results(results, as_json: bool):
    if as_json:
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False))
        return
    if not results:
        print("No suggestions")
    for result in results:
        print(f"{result.score:.2f}  {result.display}  "
              f"({result.primary} > {result.secondary}, {result.tier.value})")


def main():
    parser = argparse.ArgumentParser(description="Resolve location text")
    parser.add_argument("--csv", type=Path, default=None,
                       help="Taxonomy CSV to use instead of the configured one")
    parser.add_argument("--json", action="store_true",
                       help="Print JSON output")
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    match_parser = subparsers.add_parser("match", help="Best single match")
    match_parser.add_argument("query")
    
    search_parser = subparsers.add_parser("search", help="Ranked suggestions")
    search_parser.add_argument("query")
    search_parser.add_argument("--limit", type=int, default=None)
    
    projections_parser = subparsers.add_parser("projections", help="List taxonomy names")
    projections_parser.add_argument("--primary", default=None)
    projections_parser.add_argument("--secondary", default=None)
    
    args = parser.parse_args()
    setup_logging(LOG_LEVEL)
    
    try:
        if args.csv:
            entries = load_taxonomy_from_csv(args.csv)
            validate_taxonomy(entries, strict=STRICT_INDEX)
            index = LocationIndex.build(entries, NAME_ALIASES, strict=STRICT_INDEX)
        else:
            entries = get_taxonomy()
            index = get_location_index()
    except TaxonomyError as e:
        log_error(e, {"script": "resolve_location", "csv_path": str(args.csv)})
        print(f"❌ {e}", file=sys.stderr)
        return 1
    
    if args.command == "match":
        _print_match(match_location(args.query, index), args.json)
    elif args.command == "search":
        _print_results(search_locations(args.query, args.limit, entries), args.json)
    else:
        if args.primary and args.secondary:
            names = get_tertiaries_for_pair(args.primary, args.secondary, entries)
        elif args.primary:
            names = get_secondaries_for_primary(args.primary, entries)
        else:
            names = get_primaries(entries)
        if args.json:
            print(json.dumps(names, ensure_ascii=False))
        else:
            print("\n".join(names))
    return 0


if __name__ == "__main__":
    sys.exit(main())
