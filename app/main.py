from fastapi import FastAPI
from app.api import healthcheck, itinerary, plan
from app.api.v1.api import api_router
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="AI Trip Planner API",
    description="Generates, structures and stores AI-planned travel itineraries.",
    version="1.0.0"
)

register_exception_handlers(app)

app.include_router(plan.router)
app.include_router(itinerary.router)
app.include_router(healthcheck.router)

# Include the v1 router
app.include_router(api_router, prefix="/api/v1")

@app.get("/", tags=["Health"])
def read_root():
    """
    Root endpoint to check if the API is running.
    """
    return {"status": "ok", "message": "Welcome to the AI Trip Planner API!"}

# To run the app, save this and in your terminal run:
# uvicorn app.main:app --reload
