from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from app.schemas.feed import CamelModel


class Urgency(str, Enum):
    """Triage urgency, totally ordered low < medium < high < emergency."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"

    @property
    def rank(self) -> int:
        return _URGENCY_RANK[self.value]

    def __lt__(self, other):
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank >= other.rank


_URGENCY_RANK = {"low": 1, "medium": 2, "high": 3, "emergency": 4}


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class SymptomQuery(CamelModel):
    species: str
    symptoms: List[str] = Field(default_factory=list)
    age: Optional[str] = None
    duration: Optional[str] = None
    severity: Severity = Severity.MODERATE

    @field_validator("severity", mode="before")
    @classmethod
    def none_to_moderate(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return Severity.MODERATE
        return v


class Condition(CamelModel):
    name: str
    confidence: float = Field(ge=0.0, le=1.0)
    description: str
    urgency: Urgency
    recommendations: List[str] = Field(default_factory=list)


class TriageResult(CamelModel):
    possible_conditions: List[Condition]
    general_advice: str
    should_see_vet: bool
    urgency: Urgency


class TriageResponse(TriageResult):
    message: str
