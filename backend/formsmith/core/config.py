from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Formsmith API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "API for building forms and collecting submissions"

    # Database settings
    DATABASE_URL: str = "sqlite:///./formsmith.db"
    DATABASE_ECHO: bool = False

    # Single shared admin identity
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "password123"

    SESSION_COOKIE_NAME: str = "admin-session"
    SESSION_DURATION_HOURS: int = 24
    COOKIE_SECURE: bool = False  # Turn on in production

    OPENAI_API_KEY: Optional[str] = None  # Make it optional
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_MAX_TOKENS: int = 1000
    OPENAI_TEMPERATURE: float = 0.7

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:8000",
    ]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True  # Keys must match the .env names exactly

settings = Settings()
