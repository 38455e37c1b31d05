from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON uses camelCase, python code uses snake_case; both accepted on input
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Purpose(str, Enum):
    GENERAL = "general"
    MEAT = "meat"
    DAIRY = "dairy"
    BREEDING = "breeding"


class PregnancyStatus(str, Enum):
    NONE = "none"
    PREGNANT = "pregnant"
    LACTATING = "lactating"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class FeedQuery(CamelModel):
    species: str
    age: str
    # kg; numeric strings are accepted, anything non-positive is ignored
    weight: Optional[Union[float, str]] = None
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    purpose: Purpose = Purpose.GENERAL
    pregnancy_status: PregnancyStatus = PregnancyStatus.NONE


class DailyFeedAmount(CamelModel):
    quantity: float
    unit: str
    feed_type: str


class ScheduleEntry(CamelModel):
    time: str
    amount: float
    unit: str
    feed_type: str


class WaterRequirement(CamelModel):
    quantity: float
    unit: str


class Supplement(CamelModel):
    name: str
    amount: str
    frequency: str


class FeedPlan(CamelModel):
    daily_feed_amount: DailyFeedAmount
    feeding_schedule: List[ScheduleEntry]
    nutritional_notes: List[str] = Field(default_factory=list)
    water_requirement: WaterRequirement
    supplements: Optional[List[Supplement]] = None
