import pytest

from app.knowledge.feed_table import (
    FEED_TABLE,
    GENERIC_FEED_RECORD,
    feed_variants,
    lookup_feed_record,
)
from app.knowledge.symptom_table import SYMPTOM_TABLE, known_symptoms, lookup_symptom_conditions


def test_lookup_feed_record_hit():
    record = lookup_feed_record("Cattle", "adult", "lactating")
    assert record.quantity == 22
    assert record.water_quantity == 80


@pytest.mark.parametrize(
    "species, age_class, variant",
    [("unicorn", "adult", "general"), ("goat", "elder", "general"), ("sheep", "adult", "dairy")],
)
def test_lookup_feed_record_miss(species, age_class, variant):
    assert lookup_feed_record(species, age_class, variant) is None


def test_feed_variants():
    assert set(feed_variants("cattle", "adult")) == {"general", "dairy", "pregnant", "lactating"}
    assert feed_variants("poultry", "young") == ("general",)
    assert feed_variants("unicorn", "adult") == ()


def test_every_species_has_general_records():
    for species, by_age in FEED_TABLE.items():
        for age_class in ("young", "adult"):
            assert "general" in by_age[age_class], (species, age_class)


def test_record_schedules_add_up():
    records = [GENERIC_FEED_RECORD] + [
        record
        for by_age in FEED_TABLE.values()
        for variants in by_age.values()
        for record in variants.values()
    ]
    for record in records:
        assert sum(p.amount for p in record.schedule) == pytest.approx(record.quantity)


def test_feed_table_is_read_only():
    with pytest.raises(TypeError):
        FEED_TABLE["pig"] = {}
    with pytest.raises(TypeError):
        FEED_TABLE["cattle"]["adult"]["meat"] = GENERIC_FEED_RECORD


def test_symptom_confidences_in_range():
    for by_symptom in SYMPTOM_TABLE.values():
        for phrase, conditions in by_symptom.items():
            assert phrase == phrase.strip().lower()
            for condition in conditions:
                assert 0.0 <= condition.confidence <= 1.0


def test_lookup_symptom_conditions():
    conditions = lookup_symptom_conditions("Sheep", "Loss of Appetite")
    assert [c.name for c in conditions] == ["Internal Parasites"]
    assert lookup_symptom_conditions("sheep", "fever") is None
    assert lookup_symptom_conditions("unicorn", "fever") is None


def test_known_symptoms():
    assert known_symptoms("poultry") == ("lethargy", "reduced egg production")
    assert known_symptoms("unicorn") == ()
