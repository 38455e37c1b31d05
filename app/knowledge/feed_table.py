"""
Static feed reference table.

Layout: species -> age class ("young" | "adult") -> variant
("general" | "dairy" | "pregnant" | "lactating" | "meat") -> FeedRecord.

Edit the data below to extend the table; nothing here is mutated at runtime.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from app.engines.normalize import normalize_key


@dataclass(frozen=True)
class FeedPortion:
    time: str
    amount: float
    unit: str
    feed_type: str


@dataclass(frozen=True)
class SupplementSpec:
    name: str
    amount: str
    frequency: str


@dataclass(frozen=True)
class FeedRecord:
    quantity: float
    unit: str
    feed_type: str
    water_quantity: float
    water_unit: str
    schedule: Tuple[FeedPortion, ...]
    notes: Tuple[str, ...]
    supplements: Tuple[SupplementSpec, ...] = ()


def _twice_daily(amount, unit, feed_type):
    return (
        FeedPortion("Morning", amount, unit, feed_type),
        FeedPortion("Evening", amount, unit, feed_type),
    )


DEFAULT_TYPICAL_WEIGHT_KG = 100.0

TYPICAL_WEIGHTS_KG: Mapping[str, float] = MappingProxyType({
    "cattle": 500.0,
    "goat": 50.0,
    "sheep": 60.0,
    "poultry": 2.0,
})

# Used when the species or its age class is not in the table
GENERIC_FEED_RECORD = FeedRecord(
    quantity=2,
    unit="kg",
    feed_type="hay/grass",
    water_quantity=5,
    water_unit="liters",
    schedule=_twice_daily(1, "kg", "hay/grass"),
    notes=("Consult with a veterinarian for specific recommendations",),
)

_CATTLE = {
    "adult": {
        "general": FeedRecord(
            quantity=15, unit="kg", feed_type="hay/grass",
            water_quantity=50, water_unit="liters",
            schedule=_twice_daily(7.5, "kg", "hay/grass"),
            notes=("Ensure access to fresh water at all times", "Provide mineral supplements"),
        ),
        "dairy": FeedRecord(
            quantity=20, unit="kg", feed_type="hay/concentrate mix",
            water_quantity=70, water_unit="liters",
            schedule=(
                FeedPortion("Morning", 8, "kg", "hay/concentrate"),
                FeedPortion("Midday", 4, "kg", "concentrate"),
                FeedPortion("Evening", 8, "kg", "hay/concentrate"),
            ),
            notes=("High-quality feed for milk production", "Calcium supplements recommended"),
        ),
        "pregnant": FeedRecord(
            quantity=18, unit="kg", feed_type="hay/concentrate mix",
            water_quantity=60, water_unit="liters",
            schedule=_twice_daily(9, "kg", "hay/concentrate"),
            notes=("Increased nutrition for pregnancy", "Monitor body condition"),
        ),
        "lactating": FeedRecord(
            quantity=22, unit="kg", feed_type="hay/concentrate mix",
            water_quantity=80, water_unit="liters",
            schedule=(
                FeedPortion("Morning", 9, "kg", "hay/concentrate"),
                FeedPortion("Midday", 4, "kg", "concentrate"),
                FeedPortion("Evening", 9, "kg", "hay/concentrate"),
            ),
            notes=("High energy feed for milk production", "Ensure adequate protein"),
        ),
    },
    "young": {
        "general": FeedRecord(
            quantity=5, unit="kg", feed_type="hay/starter feed",
            water_quantity=15, water_unit="liters",
            schedule=_twice_daily(2.5, "kg", "hay/starter"),
            notes=("Starter feed for young animals", "Gradual transition to adult feed"),
        ),
    },
}

_GOAT = {
    "adult": {
        "general": FeedRecord(
            quantity=2.5, unit="kg", feed_type="hay/browse",
            water_quantity=5, water_unit="liters",
            schedule=_twice_daily(1.25, "kg", "hay/browse"),
            notes=("Goats prefer browse and variety", "Mineral supplements important"),
        ),
        "dairy": FeedRecord(
            quantity=3.5, unit="kg", feed_type="hay/concentrate mix",
            water_quantity=8, water_unit="liters",
            schedule=(
                FeedPortion("Morning", 1.5, "kg", "hay/concentrate"),
                FeedPortion("Evening", 2, "kg", "hay/concentrate"),
            ),
            notes=("High-quality feed for milk production",),
        ),
    },
    "young": {
        "general": FeedRecord(
            quantity=0.5, unit="kg", feed_type="hay/starter",
            water_quantity=1, water_unit="liters",
            schedule=_twice_daily(0.25, "kg", "hay/starter"),
            notes=("Starter feed for kids",),
        ),
    },
}

_SHEEP = {
    "adult": {
        "general": FeedRecord(
            quantity=2, unit="kg", feed_type="hay/grass",
            water_quantity=4, water_unit="liters",
            schedule=_twice_daily(1, "kg", "hay/grass"),
            notes=("Good quality hay essential", "Salt and mineral blocks"),
        ),
    },
    "young": {
        "general": FeedRecord(
            quantity=0.5, unit="kg", feed_type="hay/starter",
            water_quantity=1, water_unit="liters",
            schedule=_twice_daily(0.25, "kg", "hay/starter"),
            notes=("Starter feed for lambs",),
        ),
    },
}

_POULTRY = {
    "adult": {
        "general": FeedRecord(
            quantity=0.12, unit="kg", feed_type="layer feed",
            water_quantity=0.25, water_unit="liters",
            schedule=_twice_daily(0.06, "kg", "layer feed"),
            notes=("Layer feed for egg production", "Grit and calcium supplements"),
        ),
        "meat": FeedRecord(
            quantity=0.15, unit="kg", feed_type="broiler feed",
            water_quantity=0.3, water_unit="liters",
            schedule=_twice_daily(0.075, "kg", "broiler feed"),
            notes=("High-protein broiler feed",),
        ),
    },
    "young": {
        "general": FeedRecord(
            quantity=0.05, unit="kg", feed_type="starter feed",
            water_quantity=0.1, water_unit="liters",
            schedule=_twice_daily(0.025, "kg", "starter feed"),
            notes=("Starter feed for chicks",),
        ),
    },
}


def _freeze(table):
    return MappingProxyType({
        species: MappingProxyType({
            age_class: MappingProxyType(variants)
            for age_class, variants in by_age.items()
        })
        for species, by_age in table.items()
    })


FEED_TABLE = _freeze({
    "cattle": _CATTLE,
    "goat": _GOAT,
    "sheep": _SHEEP,
    "poultry": _POULTRY,
})


def feed_variants(species: str, age_class: str) -> Tuple[str, ...]:
    """Variant keys available for a species/age class; empty when either is unknown."""
    by_age = FEED_TABLE.get(normalize_key(species))
    if by_age is None:
        return ()
    return tuple(by_age.get(normalize_key(age_class), {}))


def lookup_feed_record(species: str, age_class: str, variant: str) -> Optional[FeedRecord]:
    by_age = FEED_TABLE.get(normalize_key(species))
    if by_age is None:
        return None
    variants = by_age.get(normalize_key(age_class))
    if variants is None:
        return None
    return variants.get(normalize_key(variant))


def typical_weight_for(species: str) -> float:
    return TYPICAL_WEIGHTS_KG.get(normalize_key(species), DEFAULT_TYPICAL_WEIGHT_KG)
