import math

import pytest

from app.engines.feed_calculator import (
    VARIANT_PRIORITY,
    age_in_months,
    build_plan,
    calculate_feed,
    classify_age,
    select_variant,
)
from app.engines.normalize import parse_positive_number, round_half_up
from app.knowledge.feed_table import (
    FEED_TABLE,
    FeedPortion,
    FeedRecord,
    SupplementSpec,
    lookup_feed_record,
)
from app.schemas.feed import FeedQuery


def _schedule(plan):
    return [(s.time, s.amount) for s in plan.feeding_schedule]


def test_adult_cattle_general_plan():
    plan = calculate_feed(FeedQuery(species="cattle", age="2 years", purpose="general"))
    assert plan.daily_feed_amount.quantity == 15
    assert plan.daily_feed_amount.unit == "kg"
    assert plan.daily_feed_amount.feed_type == "hay/grass"
    assert _schedule(plan) == [("Morning", 7.5), ("Evening", 7.5)]
    assert plan.water_requirement.quantity == 50


def test_lactating_beats_dairy_purpose():
    plan = calculate_feed(
        FeedQuery(species="cattle", age="2 years", purpose="dairy", pregnancy_status="lactating")
    )
    assert plan.daily_feed_amount.quantity == 22
    assert plan.water_requirement.quantity == 80
    assert plan.water_requirement.unit == "liters"
    assert [s.time for s in plan.feeding_schedule] == ["Morning", "Midday", "Evening"]


def test_pregnant_beats_dairy_purpose():
    plan = calculate_feed(
        FeedQuery(species="cattle", age="3 years", purpose="dairy", pregnancy_status="pregnant")
    )
    assert plan.daily_feed_amount.quantity == 18


def test_dairy_purpose_selects_dairy_record():
    plan = calculate_feed(FeedQuery(species="goat", age="adult", purpose="dairy"))
    assert plan.daily_feed_amount.quantity == 3.5
    assert _schedule(plan) == [("Morning", 1.5), ("Evening", 2)]


def test_requested_purpose_used_when_present():
    plan = calculate_feed(FeedQuery(species="poultry", age="adult", purpose="meat"))
    assert plan.daily_feed_amount.feed_type == "broiler feed"
    assert plan.daily_feed_amount.quantity == 0.15


def test_missing_variant_falls_back_to_general():
    # sheep have no pregnant or breeding record
    plan = calculate_feed(
        FeedQuery(species="sheep", age="adult", purpose="breeding", pregnancy_status="pregnant")
    )
    assert plan.daily_feed_amount.quantity == 2
    assert plan.nutritional_notes == ["Good quality hay essential", "Salt and mineral blocks"]


def test_unknown_species_gets_generic_plan():
    plan = calculate_feed(FeedQuery(species="unicorn", age="5"))
    assert plan.daily_feed_amount.quantity == 2
    assert plan.daily_feed_amount.unit == "kg"
    assert plan.daily_feed_amount.feed_type == "hay/grass"
    assert plan.water_requirement.quantity == 5
    assert _schedule(plan) == [("Morning", 1), ("Evening", 1)]
    assert plan.supplements is None


def test_generic_plan_ignores_weight():
    plan = calculate_feed(FeedQuery(species="unicorn", age="adult", weight=900))
    assert plan.daily_feed_amount.quantity == 2
    assert _schedule(plan) == [("Morning", 1), ("Evening", 1)]


def test_species_lookup_is_case_insensitive():
    plan = calculate_feed(FeedQuery(species="  CaTTle ", age="Adult"))
    assert plan.daily_feed_amount.quantity == 15


@pytest.mark.parametrize("age", ["calf", "Young bull", "3 months", "6", "kid", "2 weeks", "11.5"])
def test_young_ages(age):
    assert classify_age(age) == "young"


@pytest.mark.parametrize("age", ["adult", "2 years", "12", "18 months", "1 yr", "mature", ""])
def test_adult_ages(age):
    assert classify_age(age) == "adult"


def test_age_in_months_units():
    assert age_in_months("2 years") == 24
    assert age_in_months("8 months old") == 8
    assert age_in_months("about two years") is None


def test_young_cattle_plan():
    plan = calculate_feed(FeedQuery(species="cattle", age="calf"))
    assert plan.daily_feed_amount.quantity == 5
    assert plan.daily_feed_amount.feed_type == "hay/starter feed"


def test_weight_scales_daily_and_schedule():
    plan = calculate_feed(FeedQuery(species="cattle", age="adult", weight=250))
    assert plan.daily_feed_amount.quantity == 7.5
    # 7.5 * 0.5 = 3.75, rounded half up
    assert _schedule(plan) == [("Morning", 3.8), ("Evening", 3.8)]
    # water is not weight-adjusted
    assert plan.water_requirement.quantity == 50


def test_numeric_string_weight_is_accepted():
    plan = calculate_feed(FeedQuery(species="goat", age="adult", purpose="dairy", weight="75"))
    assert plan.daily_feed_amount.quantity == 5.3
    assert _schedule(plan) == [("Morning", 2.3), ("Evening", 3.0)]


def test_unlisted_species_weight_uses_default_typical_weight():
    from app.knowledge.feed_table import typical_weight_for

    assert typical_weight_for("pig") == 100
    assert typical_weight_for("Poultry") == 2


@pytest.mark.parametrize("weight", [0, -40, "abc", "", "nan", "snan", "1e400", "-1e400", "1e-400", None])
def test_unusable_weight_means_no_scaling(weight):
    plan = calculate_feed(FeedQuery(species="cattle", age="adult", weight=weight))
    assert plan.daily_feed_amount.quantity == 15
    assert _schedule(plan) == [("Morning", 7.5), ("Evening", 7.5)]


@pytest.mark.parametrize("species", sorted(FEED_TABLE))
@pytest.mark.parametrize("age", ["young", "adult"])
@pytest.mark.parametrize("weight", [None, 1.5, 37, 480])
def test_schedule_sums_to_daily_amount(species, age, weight):
    plan = calculate_feed(FeedQuery(species=species, age=age, weight=weight))
    total = sum(s.amount for s in plan.feeding_schedule)
    assert abs(total - plan.daily_feed_amount.quantity) <= 0.1 + 1e-9


@pytest.mark.parametrize("weight", [10, 123.4, 999])
def test_scaled_quantity_matches_formula(weight):
    base = lookup_feed_record("cattle", "adult", "dairy").quantity
    plan = calculate_feed(FeedQuery(species="cattle", age="adult", purpose="dairy", weight=weight))
    assert plan.daily_feed_amount.quantity == round_half_up((weight / 500) * base, 1)


@pytest.mark.parametrize("weight", [1e30, "1e30"])
def test_huge_weight_still_returns_plan(weight):
    plan = calculate_feed(FeedQuery(species="cattle", age="adult", weight=weight))
    # 1e30 / 500 * 15
    assert math.isclose(plan.daily_feed_amount.quantity, 3e28)
    assert all(math.isclose(s.amount, 1.5e28) for s in plan.feeding_schedule)


def test_parse_positive_number_rejects_float_overflow_and_underflow():
    assert parse_positive_number("1e400") is None
    assert parse_positive_number("1e-400") is None
    assert parse_positive_number("inf") is None
    assert parse_positive_number(" 42.5 ") == 42.5


def test_round_half_up_handles_large_values():
    assert round_half_up(3e28) == 3e28
    assert round_half_up(1.5e300) == 1.5e300
    assert round_half_up(0.25) == 0.3


def test_table_records_carry_no_supplements():
    plan = calculate_feed(FeedQuery(species="cattle", age="adult", purpose="dairy"))
    assert plan.supplements is None


def test_supplements_copied_from_record():
    record = FeedRecord(
        quantity=4, unit="kg", feed_type="hay",
        water_quantity=10, water_unit="liters",
        schedule=(FeedPortion("Morning", 2, "kg", "hay"), FeedPortion("Evening", 2, "kg", "hay")),
        notes=("note",),
        supplements=(SupplementSpec("Salt lick", "free choice", "daily"),),
    )
    plan = build_plan(record, factor=2.0)
    assert [(s.name, s.amount, s.frequency) for s in plan.supplements] == [
        ("Salt lick", "free choice", "daily"),
    ]
    assert plan.daily_feed_amount.quantity == 8
    assert plan.water_requirement.quantity == 10


def test_variant_priority_order_is_explicit():
    assert [rule for rule, _ in VARIANT_PRIORITY] == [
        "lactating", "pregnant", "dairy", "purpose", "general",
    ]


def test_select_variant_skips_unavailable():
    query = FeedQuery(species="goat", age="adult", purpose="dairy", pregnancy_status="lactating")
    assert select_variant(query, ("general", "dairy")) == "dairy"
    assert select_variant(query, ("meat",)) is None


def test_calculate_feed_is_deterministic():
    query = FeedQuery(species="cattle", age="2 years", weight=420, pregnancy_status="lactating")
    assert calculate_feed(query).model_dump() == calculate_feed(query).model_dump()


def test_plan_does_not_share_state_with_table():
    plan = calculate_feed(FeedQuery(species="sheep", age="adult"))
    plan.nutritional_notes.append("extra")
    again = calculate_feed(FeedQuery(species="sheep", age="adult"))
    assert "extra" not in again.nutritional_notes
