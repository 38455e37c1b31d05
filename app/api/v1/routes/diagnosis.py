from fastapi import APIRouter

from app.schemas.diagnosis import DiagnosisRequest, DiagnosisResult
from app.services.diagnosis import diagnose_symptom

router = APIRouter(tags=["Diagnosis"])


@router.post("/diagnosis", response_model=DiagnosisResult)
def diagnose(req: DiagnosisRequest):
    """
    Model-backed diagnosis from a free-text symptom description. Falls back to
    the rule-based symptom checker when the model is unavailable; the
    `source` field says which one answered.
    """
    return diagnose_symptom(req)
