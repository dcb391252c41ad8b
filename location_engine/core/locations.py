"""Bundled Hong Kong location taxonomy (region > district > sub-area)."""
from location_engine.core.models import LocationEntry

HK_ISLAND = "Hong Kong Island"
KOWLOON = "Kowloon"
NEW_TERRITORIES = "New Territories"


def _districts(primary, *secondaries):
    return tuple(LocationEntry(primary, secondary) for secondary in secondaries)


def _sub_areas(primary, secondary, *tertiaries):
    return tuple(LocationEntry(primary, secondary, tertiary) for tertiary in tertiaries)


LOCATIONS = (
    _districts(
        HK_ISLAND,
        "Central",
        "Sheung Wan",
        "Kennedy Town",
        "Mid-Levels",
        "The Peak",
        "Admiralty",
        "Wan Chai",
        "Causeway Bay",
        "Happy Valley",
        "Jardine's Lookout",
        "North Point",
        "Quarry Bay",
        "Shau Kei Wan",
        "Chai Wan",
        "Aberdeen",
        "Ap Lei Chau",
        "Repulse Bay",
        "Stanley",
    )
    + _districts(
        KOWLOON,
        "Tsim Sha Tsui",
        "Jordan",
        "Yau Ma Tei",
        "Mong Kok",
        "Prince Edward",
        "Sham Shui Po",
        "Cheung Sha Wan",
        "Mei Foo",
        "Hung Hom",
        "To Kwa Wan",
        "Kowloon City",
        "Kowloon Tong",
        "Wong Tai Sin",
        "Diamond Hill",
        "Kowloon Bay",
        "Kwun Tong",
        "Lam Tin",
    )
    + _districts(
        NEW_TERRITORIES,
        "Sha Tin",
        "Tai Wai",
        "Ma On Shan",
        "Tai Po",
        "Tsuen Wan",
        "Kwai Chung",
        "Tsing Yi",
        "Tuen Mun",
        "Sai Kung",
        "Clear Water Bay",
    )
    + _sub_areas(NEW_TERRITORIES, "Tseung Kwan O", "LOHAS Park", "Hang Hau", "Po Lam")
    + _sub_areas(NEW_TERRITORIES, "Yuen Long", "Yuen Long Town", "Tin Shui Wai", "Mai Po / Nam Sang Wai")
    + _sub_areas(NEW_TERRITORIES, "North District", "Sheung Shui", "Fanling", "Robin’s Nest")
    + _sub_areas(
        NEW_TERRITORIES,
        "Lantau Island",
        "Tung Chung",
        "Discovery Bay",
        "Mui Wo",
        "Chek Lap Kok (Hong Kong International Airport)",
    )
)
