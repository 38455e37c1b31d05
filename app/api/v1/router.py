from fastapi import APIRouter
import app.api.v1.routes.feed as feed
import app.api.v1.routes.symptoms as symptoms
import app.api.v1.routes.diagnosis as diagnosis

api_router = APIRouter()

api_router.include_router(
    feed.router,
    prefix="",
)

api_router.include_router(
    symptoms.router,
    prefix="",
)

api_router.include_router(
    diagnosis.router,
    prefix="",
)
