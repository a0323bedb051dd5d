import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Gemini exposes an OpenAI-compatible chat completions endpoint
GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings:
    GOOGLE_GENERATIVE_AI_API_KEY: str | None = os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")
    GENERATION_MODEL: str = os.getenv("GENERATION_MODEL", "gemini-1.5-flash")
    GENERATION_API_BASE: str = os.getenv("GENERATION_API_BASE", GEMINI_OPENAI_BASE_URL)

    # Token ceilings for trip generation and the connectivity probe
    MAX_OUTPUT_TOKENS: int = 2000
    TEST_MAX_TOKENS: int = 50

    SUPABASE_URL: str | None = os.getenv("SUPABASE_URL")
    SUPABASE_KEY: str | None = os.getenv("SUPABASE_KEY")
    TRIPS_TABLE: str = os.getenv("TRIPS_TABLE", "trips")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Trip history filters
    RECENT_TRIP_WINDOW_DAYS: int = 30
    LONG_TRIP_MIN_DAYS: int = 8

    def missing_settings(self) -> list[str]:
        """
        Names of required environment variables that are not set.
        """
        required = {
            "GOOGLE_GENERATIVE_AI_API_KEY": self.GOOGLE_GENERATIVE_AI_API_KEY,
            "SUPABASE_URL": self.SUPABASE_URL,
            "SUPABASE_KEY": self.SUPABASE_KEY,
        }
        return [name for name, value in required.items() if not value]


settings = Settings()
