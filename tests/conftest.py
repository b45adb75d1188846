"""
Shared fixtures for Phone Finder tests.

Log files go to a temporary directory so importing api.py during tests
doesn't write into the working tree.
"""

import os
import tempfile

os.environ.setdefault("PHONEFINDER_LOG_DIR", tempfile.mkdtemp(prefix="phonefinder-logs-"))

import pytest

from core.context import PhoneRecord, Review


def make_phone(brand, model, price, **kwargs) -> PhoneRecord:
    """Build a phone with sensible defaults for tests."""
    kwargs.setdefault("specs", {
        "display": "6.5-inch AMOLED",
        "processor": "Dimensity 7200",
        "camera": "50MP",
        "battery": "5000mAh",
        "ram": "8GB RAM",
        "storage": "128GB Storage",
    })
    kwargs.setdefault("features", ("5G",))
    kwargs.setdefault("pros", ("Good value",))
    kwargs.setdefault("cons", ("Bloatware",))
    return PhoneRecord(brand=brand, model=model, price=price, **kwargs)


@pytest.fixture
def catalog():
    """Seven phones in a fixed order."""
    return (
        make_phone(
            "Samsung", "Galaxy M34 5G", 18000,
            specs={
                "display": "6.5-inch Super AMOLED",
                "processor": "Exynos 1280",
                "camera": "50MP OIS",
                "battery": "6000mAh",
                "ram": "8GB RAM",
                "storage": "128GB Storage",
            },
            features=("5G", "AMOLED display", "Big battery"),
            pros=("Battery life", "Vivid screen", "Long updates"),
            cons=("No charger in box", "Heavy", "Slow charging"),
            reviews=(Review(user="Arjun", comment="Lasts two days."),),
            id="samsung-m34",
        ),
        make_phone(
            "Samsung", "Galaxy S23 FE", 54999,
            features=("5G", "Waterproof IP68", "Photography"),
            id="samsung-s23fe",
        ),
        make_phone(
            "Redmi", "13C 5G", 9999,
            specs={
                "display": "6.74-inch LCD",
                "processor": "Dimensity 6100+",
                "camera": "50MP",
                "battery": "5000mAh",
                "ram": "4GB RAM",
                "storage": "128GB Storage",
            },
            features=("5G", "Budget friendly", "Students"),
            id="redmi-13c",
        ),
        make_phone(
            "iQOO", "Z9 5G", 19999,
            features=("5G", "Gaming", "Performance"),
            id="iqoo-z9",
        ),
        make_phone(
            "OnePlus", "12R", 39999,
            specs={
                "display": "6.78-inch AMOLED",
                "processor": "Snapdragon 8 Gen 2",
                "camera": "50MP OIS",
                "battery": "5500mAh",
                "ram": "16GB RAM",
                "storage": "256GB Storage",
            },
            features=("5G", "Gaming", "Performance"),
            id="oneplus-12r",
        ),
        make_phone(
            "Google", "Pixel 8a", 52999,
            features=("5G", "Photography", "Compact"),
            id="pixel-8a",
        ),
        make_phone(
            "Apple", "iPhone 13", 52999,
            specs={
                "display": "6.1-inch OLED",
                "processor": "A15 Bionic",
                "camera": "12MP dual",
                "battery": "3240mAh",
                "ram": "4GB RAM",
                "storage": "128GB Storage",
            },
            features=("Compact", "Photography"),
            id="iphone-13",
        ),
    )
