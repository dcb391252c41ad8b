"""Configuration management for the location engine."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base paths
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Optional CSV taxonomy replacing the bundled dataset
_taxonomy_csv = os.getenv("TAXONOMY_CSV_PATH")
TAXONOMY_CSV_PATH: Optional[Path] = None
if _taxonomy_csv:
    TAXONOMY_CSV_PATH = Path(_taxonomy_csv)
    if not TAXONOMY_CSV_PATH.is_absolute():
        TAXONOMY_CSV_PATH = PROJECT_ROOT / TAXONOMY_CSV_PATH

# Search settings
SEARCH_LIMIT: int = int(os.getenv("SEARCH_LIMIT", "10"))

# Fail on index key collisions and hierarchy violations instead of logging them
STRICT_INDEX: bool = os.getenv("STRICT_INDEX", "false").lower() == "true"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
