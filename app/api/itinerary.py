from fastapi import APIRouter
from app.models.itinerary import ParseItineraryRequest, ParseItineraryResponse
from app.logic.itinerary_parser import parse_itinerary

router = APIRouter(prefix="/api", tags=["Itinerary"])


@router.post("/parse-itinerary", response_model=ParseItineraryResponse)
def parse_itinerary_text(request: ParseItineraryRequest):
    # parsed=False tells the client to show the raw text instead
    days = parse_itinerary(request.itinerary)
    return {"parsed": bool(days), "days": days}
