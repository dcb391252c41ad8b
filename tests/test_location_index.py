"""Tests for location index construction."""
import pytest
from location_engine.core.errors import KeyCollisionError
from location_engine.core.location_index import LocationIndex, alias_confidence, get_location_index
from location_engine.core.models import Granularity, LocationEntry


def test_canonical_keys(index):
    """Test every present name is registered under its normalized form."""
    assert index["wan chai"].granularity == Granularity.SECONDARY
    assert index["wan chai"].confidence == pytest.approx(0.90)
    assert index["discovery bay"].granularity == Granularity.TERTIARY
    assert index["discovery bay"].confidence == pytest.approx(0.95)
    assert index["hong kong island"].granularity == Granularity.PRIMARY
    assert index["hong kong island"].confidence == pytest.approx(0.85)
    assert index["wan chai"].alias is None


def test_display_name(index):
    """Test display is the sub-area when present, else the district."""
    assert index["discovery bay"].display == "Discovery Bay"
    assert index["lantau island"].display in ("Discovery Bay", "Tung Chung")
    assert index["mong kok"].display == "Mong Kok"


def test_alias_keys(index):
    """Test aliases share the entry but carry reduced confidence."""
    mk = index["mk"]
    assert mk.secondary == "Mong Kok"
    assert mk.granularity == Granularity.SECONDARY
    assert mk.alias == "mk"
    assert mk.confidence == pytest.approx(0.85)
    assert index["db"].confidence == pytest.approx(0.90)
    assert index["kln"].confidence == pytest.approx(0.80)


def test_alias_confidence_floor():
    """Test alias confidence never drops below 0.8."""
    assert alias_confidence(0.95) == pytest.approx(0.90)
    assert alias_confidence(0.85) == pytest.approx(0.80)
    assert alias_confidence(0.81) == pytest.approx(0.80)


def test_shared_region_is_not_a_collision(index):
    """Test a region name repeated for each of its districts is benign."""
    assert index.collisions == 0
    # Last registered Kowloon district wins the region key
    assert index["kowloon"].secondary == "Yau Tsim Mong"


def test_collision_last_write_wins(sample_locations, caplog):
    """Test an alias that shadows another place overwrites it and is reported."""
    index = LocationIndex.build(sample_locations, {"mong kok": ["wan chai"]})
    
    assert index.collisions == 1
    assert index["wan chai"].secondary == "Mong Kok"
    assert index["wan chai"].alias == "wan chai"
    assert "Index key collision" in caplog.text


def test_collision_strict(sample_locations):
    """Test strict mode refuses to overwrite an unrelated key."""
    with pytest.raises(KeyCollisionError) as excinfo:
        LocationIndex.build(sample_locations, {"mong kok": ["wan chai"]}, strict=True)
    
    assert excinfo.value.key == "wan chai"
    assert excinfo.value.existing.secondary == "Wan Chai"
    assert excinfo.value.incoming.secondary == "Mong Kok"


def test_empty_keys_never_registered():
    """Test names that normalize to nothing are skipped."""
    index = LocationIndex.build(
        [LocationEntry("Kowloon", "???")],
        {"kowloon": ["!!"]}
    )
    assert "" not in index
    assert list(index) == ["kowloon"]


def test_index_is_read_only(index):
    """Test the index cannot be modified after construction."""
    with pytest.raises(TypeError):
        index._entries["new"] = index["mk"]


def test_default_index_is_memoized():
    """Test the process-wide index is built once."""
    assert get_location_index() is get_location_index()
    assert len(get_location_index()) > 0
