"""Pytest configuration and fixtures."""
import pytest
from location_engine.core.location_index import LocationIndex
from location_engine.core.models import LocationEntry


@pytest.fixture
def sample_locations():
    """Create a small three-level taxonomy."""
    return (
        LocationEntry("Hong Kong Island", "Wan Chai"),
        LocationEntry("Hong Kong Island", "Causeway Bay"),
        LocationEntry("Kowloon", "Mong Kok"),
        LocationEntry("Kowloon", "Tsim Sha Tsui"),
        LocationEntry("Kowloon", "Yau Tsim Mong"),
        LocationEntry("New Territories", "Lantau Island", "Discovery Bay"),
        LocationEntry("New Territories", "Lantau Island", "Tung Chung"),
    )


@pytest.fixture
def sample_aliases():
    """Create a small alias table."""
    return {
        "mong kok": ["mk"],
        "discovery bay": ["db"],
        "kowloon": ["kln"],
        "wan chai": ["wanchai"],
    }


@pytest.fixture
def index(sample_locations, sample_aliases):
    """Create a location index over the sample taxonomy."""
    return LocationIndex.build(sample_locations, sample_aliases)
