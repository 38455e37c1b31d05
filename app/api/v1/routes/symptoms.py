import logging
from typing import List

from fastapi import APIRouter

from app.api.v1.response_formatter import format_triage_message
from app.engines.symptom_checker import check_symptoms
from app.knowledge.symptom_table import known_symptoms
from app.schemas.symptoms import SymptomQuery, TriageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Symptoms"])


@router.post("/symptoms/check", response_model=TriageResponse)
def check_animal_symptoms(req: SymptomQuery):
    result = check_symptoms(req)
    logger.info(
        "triage species=%s symptoms=%d -> urgency=%s see_vet=%s",
        req.species, len(req.symptoms), result.urgency.value, result.should_see_vet,
    )
    return TriageResponse(
        **result.model_dump(),
        message=format_triage_message(result),
    )


@router.get("/symptoms/vocabulary/{species}", response_model=List[str])
def symptom_vocabulary(species: str):
    """Symptom phrases the checker recognises for a species (empty if unknown)."""
    return list(known_symptoms(species))
