"""
Static symptom reference table: species -> lowercased symptom phrase -> condition templates.

Matching is exact (after trimming and lowercasing); phrases outside this
vocabulary simply have no entry.
"""
from types import MappingProxyType
from typing import List, Optional, Tuple

from app.engines.normalize import normalize_key
from app.schemas.symptoms import Condition, Urgency


def _condition(name, confidence, description, urgency, recommendations):
    return Condition(
        name=name,
        confidence=confidence,
        description=description,
        urgency=urgency,
        recommendations=list(recommendations),
    )


_CATTLE = {
    "loss of appetite": (
        _condition(
            "Digestive Issues", 0.6,
            "Loss of appetite can indicate digestive problems",
            Urgency.MEDIUM,
            ["Monitor water intake", "Check for bloating", "Observe stool consistency"],
        ),
    ),
    "lameness": (
        _condition(
            "Foot Rot or Injury", 0.7,
            "Lameness often indicates foot problems or injury",
            Urgency.MEDIUM,
            ["Check hooves for injury", "Keep area clean and dry", "Limit movement"],
        ),
    ),
    "fever": (
        _condition(
            "Infection", 0.8,
            "Fever indicates possible infection",
            Urgency.HIGH,
            ["Monitor temperature", "Ensure hydration", "Isolate from other animals"],
        ),
    ),
    "diarrhea": (
        _condition(
            "Digestive Disorder", 0.75,
            "Diarrhea can indicate various digestive issues",
            Urgency.HIGH,
            ["Ensure clean water", "Monitor dehydration", "Check feed quality"],
        ),
    ),
}

_GOAT = {
    "loss of appetite": (
        _condition(
            "Parasitic Infection", 0.65,
            "Common in goats, may indicate parasites",
            Urgency.MEDIUM,
            ["Check for worms", "Monitor behavior", "Consider deworming"],
        ),
    ),
    "coughing": (
        _condition(
            "Respiratory Infection", 0.7,
            "Coughing may indicate respiratory issues",
            Urgency.HIGH,
            ["Isolate immediately", "Monitor breathing", "Ensure good ventilation"],
        ),
    ),
}

_SHEEP = {
    "loss of appetite": (
        _condition(
            "Internal Parasites", 0.7,
            "Common issue in sheep",
            Urgency.MEDIUM,
            ["Check fecal samples", "Consider deworming", "Monitor weight"],
        ),
    ),
}

_POULTRY = {
    "lethargy": (
        _condition(
            "Disease or Stress", 0.65,
            "Lethargy can indicate various health issues",
            Urgency.MEDIUM,
            ["Check environment", "Monitor food/water intake", "Observe flock behavior"],
        ),
    ),
    "reduced egg production": (
        _condition(
            "Nutritional Deficiency or Stress", 0.6,
            "Multiple possible causes",
            Urgency.LOW,
            ["Review diet", "Check lighting", "Reduce stress factors"],
        ),
    ),
}

SYMPTOM_TABLE = MappingProxyType({
    "cattle": MappingProxyType(_CATTLE),
    "goat": MappingProxyType(_GOAT),
    "sheep": MappingProxyType(_SHEEP),
    "poultry": MappingProxyType(_POULTRY),
})


def lookup_symptom_conditions(species: str, phrase: str) -> Optional[List[Condition]]:
    """Return fresh copies of the condition templates for a symptom, or None."""
    templates = SYMPTOM_TABLE.get(normalize_key(species), {}).get(normalize_key(phrase))
    if templates is None:
        return None
    return [c.model_copy(deep=True) for c in templates]


def known_symptoms(species: str) -> Tuple[str, ...]:
    return tuple(SYMPTOM_TABLE.get(normalize_key(species), {}))
