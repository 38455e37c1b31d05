import logging
from typing import List

from app.knowledge.symptom_table import lookup_symptom_conditions
from app.schemas.symptoms import Condition, Severity, SymptomQuery, TriageResult, Urgency

logger = logging.getLogger(__name__)

GENERAL_CONDITION_NAME = "General Health Concern"

SEE_VET_ADVICE = (
    "These symptoms may indicate a serious condition. "
    "Please consult a veterinarian as soon as possible."
)
MONITOR_ADVICE = (
    "Monitor the animal closely and seek veterinary care if symptoms worsen or persist."
)

REFERRAL_URGENCIES = (Urgency.HIGH, Urgency.EMERGENCY)


def general_health_concern(severity: Severity) -> Condition:
    return Condition(
        name=GENERAL_CONDITION_NAME,
        confidence=0.5,
        description="Symptoms require professional evaluation",
        urgency=Urgency.HIGH if severity == Severity.SEVERE else Urgency.MEDIUM,
        recommendations=[
            "Monitor closely",
            "Ensure clean environment",
            "Provide adequate nutrition and water",
            "Contact a veterinarian if symptoms persist",
        ],
    )


def match_conditions(species: str, symptoms: List[str]) -> List[Condition]:
    """Condition templates for every recognised symptom, in input order."""
    matched: List[Condition] = []
    for symptom in symptoms:
        conditions = lookup_symptom_conditions(species, symptom)
        if conditions is None:
            logger.debug("symptom %r not in vocabulary for species %r", symptom, species)
            continue
        matched.extend(conditions)
    return matched


def check_symptoms(query: SymptomQuery) -> TriageResult:
    conditions = match_conditions(query.species, query.symptoms)
    if not conditions:
        conditions.append(general_health_concern(query.severity))

    urgency = max(c.urgency for c in conditions)
    should_see_vet = urgency in REFERRAL_URGENCIES or query.severity == Severity.SEVERE

    return TriageResult(
        possible_conditions=conditions,
        general_advice=SEE_VET_ADVICE if should_see_vet else MONITOR_ADVICE,
        should_see_vet=should_see_vet,
        urgency=urgency,
    )
