import logging

from fastapi import APIRouter

from app.engines.feed_calculator import calculate_feed
from app.schemas.feed import FeedPlan, FeedQuery

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Feed"])


@router.post("/feed/calculate", response_model=FeedPlan)
def calculate_feed_plan(req: FeedQuery):
    """
    Daily feed plan for one animal. Unknown species or ages get a generic
    plan rather than an error.
    """
    plan = calculate_feed(req)
    logger.info(
        "feed plan species=%s age=%s purpose=%s status=%s -> %s %s/day",
        req.species, req.age, req.purpose.value, req.pregnancy_status.value,
        plan.daily_feed_amount.quantity, plan.daily_feed_amount.unit,
    )
    return plan
