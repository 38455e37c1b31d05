from typing import List, Optional

from pydantic import Field

from app.schemas.feed import CamelModel
from app.schemas.symptoms import Severity


class DiagnosisRequest(CamelModel):
    text: str  # free-text symptom description, e.g. "fever, coughing"
    species: Optional[str] = None
    age: Optional[str] = None
    severity: Optional[Severity] = None
    additional_context: Optional[str] = None


class DiagnosisResult(CamelModel):
    predicted_disease: str
    confidence_score: float = Field(ge=0.0, le=1.0)
    recommended_action: str
    emergency_flag: bool = False
    vet_required: bool = False
    full_reasoning: str = ""
    suggested_treatment: Optional[str] = None
    prevention_tips: List[str] = Field(default_factory=list)
    ai_voice_reply: Optional[str] = None
    source: str = "model"  # "model" | "rules"
