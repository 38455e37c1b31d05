"""
Rule-based feed calculator.

calculate_feed() resolves a FeedRecord through three layers, each with its own
fallback:

    species    -> unknown species             : generic record, no scaling
    age class  -> age class missing for species: generic record, no scaling
    variant    -> VARIANT_PRIORITY, first rule whose variant exists;
                  "general" if none match; generic record if even that is missing

The resolved record is then optionally scaled by body weight.
"""
import logging
import re
from typing import Callable, Optional, Tuple

from app.engines.normalize import normalize_key, parse_positive_number, round_half_up
from app.knowledge.feed_table import (
    GENERIC_FEED_RECORD,
    FeedRecord,
    feed_variants,
    lookup_feed_record,
    typical_weight_for,
)
from app.schemas.feed import (
    DailyFeedAmount,
    FeedPlan,
    FeedQuery,
    PregnancyStatus,
    Purpose,
    ScheduleEntry,
    Supplement,
    WaterRequirement,
)

logger = logging.getLogger(__name__)

YOUNG = "young"
ADULT = "adult"
GENERAL_VARIANT = "general"

JUVENILE_KEYWORDS = ("young", "calf", "kid", "lamb", "chick")
YOUNG_BELOW_MONTHS = 12

_AGE_PATTERN = re.compile(
    r"^(?P<number>\d+(?:\.\d+)?)\s*(?P<unit>[a-z]*)\.?(?:\s+old)?$"
)

_MONTHS_PER_UNIT = {
    "": 1.0,
    "m": 1.0,
    "mo": 1.0,
    "mos": 1.0,
    "month": 1.0,
    "months": 1.0,
    "y": 12.0,
    "yr": 12.0,
    "yrs": 12.0,
    "year": 12.0,
    "years": 12.0,
    "w": 12.0 / 52.0,
    "wk": 12.0 / 52.0,
    "wks": 12.0 / 52.0,
    "week": 12.0 / 52.0,
    "weeks": 12.0 / 52.0,
    "d": 12.0 / 365.0,
    "day": 12.0 / 365.0,
    "days": 12.0 / 365.0,
}


def age_in_months(age: Optional[str]) -> Optional[float]:
    """Parse "5", "8 months" or "2 years" into months; None if not a plain age."""
    match = _AGE_PATTERN.match(normalize_key(age))
    if not match:
        return None
    per_unit = _MONTHS_PER_UNIT.get(match.group("unit"))
    if per_unit is None:
        return None
    return float(match.group("number")) * per_unit


def classify_age(age: Optional[str]) -> str:
    text = normalize_key(age)
    if any(keyword in text for keyword in JUVENILE_KEYWORDS):
        return YOUNG
    months = age_in_months(text)
    if months is not None and months < YOUNG_BELOW_MONTHS:
        return YOUNG
    return ADULT


# Ordered highest priority first. Each selector returns the variant it asks
# for, or None when its condition does not hold for the query.
VariantSelector = Callable[[FeedQuery], Optional[str]]

VARIANT_PRIORITY: Tuple[Tuple[str, VariantSelector], ...] = (
    ("lactating", lambda q: "lactating" if q.pregnancy_status == PregnancyStatus.LACTATING else None),
    ("pregnant", lambda q: "pregnant" if q.pregnancy_status == PregnancyStatus.PREGNANT else None),
    ("dairy", lambda q: "dairy" if q.purpose == Purpose.DAIRY else None),
    ("purpose", lambda q: q.purpose.value if q.purpose else None),
    ("general", lambda q: GENERAL_VARIANT),
)


def select_variant(query: FeedQuery, available: Tuple[str, ...]) -> Optional[str]:
    """Return the first prioritised variant present in `available`."""
    for rule, selector in VARIANT_PRIORITY:
        variant = selector(query)
        if variant is not None and variant in available:
            logger.debug("feed variant %r chosen by rule %r", variant, rule)
            return variant
    return None


def resolve_feed_record(query: FeedQuery) -> Tuple[FeedRecord, bool]:
    """
    Walk species -> age class -> variant. Returns (record, from_table); the
    second item is False when the generic fallback record was used.
    """
    age_class = classify_age(query.age)
    available = feed_variants(query.species, age_class)
    if not available:
        logger.debug(
            "no feed data for species=%r age_class=%s, using generic record",
            query.species, age_class,
        )
        return GENERIC_FEED_RECORD, False

    variant = select_variant(query, available)
    record = lookup_feed_record(query.species, age_class, variant) if variant else None
    if record is None:
        logger.debug(
            "no usable variant for species=%r age_class=%s among %s, using generic record",
            query.species, age_class, available,
        )
        return GENERIC_FEED_RECORD, False
    return record, True


def weight_scale_factor(species: str, weight) -> Optional[float]:
    """weight / typical weight for the species, or None when weight is unusable."""
    kg = parse_positive_number(weight)
    if kg is None:
        return None
    return kg / typical_weight_for(species)


def calculate_feed(query: FeedQuery) -> FeedPlan:
    record, from_table = resolve_feed_record(query)
    # the generic record is never scaled
    factor = weight_scale_factor(query.species, query.weight) if from_table else None
    return build_plan(record, factor)


def build_plan(record: FeedRecord, factor: Optional[float] = None) -> FeedPlan:
    """Turn a FeedRecord into a FeedPlan, scaling feed amounts by `factor` if given."""
    if factor is None:
        daily = record.quantity
        amounts = [portion.amount for portion in record.schedule]
    else:
        daily = round_half_up(record.quantity * factor)
        amounts = [round_half_up(portion.amount * factor) for portion in record.schedule]

    return FeedPlan(
        daily_feed_amount=DailyFeedAmount(
            quantity=daily, unit=record.unit, feed_type=record.feed_type,
        ),
        feeding_schedule=[
            ScheduleEntry(
                time=portion.time, amount=amount, unit=portion.unit, feed_type=portion.feed_type,
            )
            for portion, amount in zip(record.schedule, amounts)
        ],
        nutritional_notes=list(record.notes),
        water_requirement=WaterRequirement(
            quantity=record.water_quantity, unit=record.water_unit,
        ),
        supplements=[
            Supplement(name=s.name, amount=s.amount, frequency=s.frequency)
            for s in record.supplements
        ] or None,
    )
