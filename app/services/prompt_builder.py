# File: app/services/prompt_builder.py

from app.models.schemas import BudgetTier, TravelerType, TripRequest

BUDGET_CONTEXT = {
    BudgetTier.LOW: "budget-friendly options, hostels, street food, free attractions",
    BudgetTier.MODERATE: "mid-range hotels, local restaurants, mix of paid and free activities",
    BudgetTier.HIGH: "luxury hotels, fine dining, premium experiences, private tours",
    BudgetTier.VERY_HIGH: (
        "ultra-luxury resorts, Michelin-starred restaurants, exclusive experiences, private jets/helicopters"
    ),
}

TRAVELER_CONTEXT = {
    TravelerType.SINGLE: "solo traveler experiences, safety tips, social opportunities, flexible scheduling",
    TravelerType.COUPLE: "romantic experiences, couple activities, intimate dining, shared adventures",
    TravelerType.FAMILY: (
        "family-friendly activities, kid-safe options, educational experiences, group accommodations"
    ),
}

FOOD_GUIDANCE = {
    BudgetTier.LOW: "Budget-friendly food options and free/cheap attractions",
    BudgetTier.VERY_HIGH: "Luxury dining and exclusive experiences",
}
DEFAULT_FOOD_GUIDANCE = "Local food recommendations and mix of activities"

TRAVELER_GUIDANCE = {
    TravelerType.FAMILY: "Family-friendly activities and safety considerations",
    TravelerType.COUPLE: "Romantic spots and couple experiences",
    TravelerType.SINGLE: "Solo travel tips and social opportunities",
}

TEST_PROMPT = "Say 'Hello! Your Google AI API is working correctly.' in a friendly way."


def build_prompt(request: TripRequest) -> str:
    """
    Turns a validated trip request into the text prompt sent to the model.
    """
    budget = request.budget.value
    travelers = request.travelers.value

    return f"""Plan a {request.days}-day trip to {request.destination} in {request.month} for a {travelers} with a {budget} budget, focused on {request.interests}.

Budget Level: {budget} - Focus on {BUDGET_CONTEXT[request.budget]}
Travel Style: {travelers} - Include {TRAVELER_CONTEXT[request.travelers]}

Please provide a detailed day-by-day itinerary that includes:
- Specific places to visit with brief descriptions
- Recommended timing for each activity
- {FOOD_GUIDANCE.get(request.budget, DEFAULT_FOOD_GUIDANCE)}
- Transportation tips appropriate for {budget} budget
- Cultural insights and tips
- {TRAVELER_GUIDANCE[request.travelers]}
- Accommodation suggestions for {budget} budget level

Start each day on its own line as "Day N: <title>" and list activities as bullet points, prefixing a time where it makes sense.

Format the response as a clear, well-structured itinerary that's easy to follow. Make it engaging and informative, tailored specifically for {travelers} with {budget} budget preferences."""
