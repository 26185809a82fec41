from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # API Configuration
    APP_NAME: str = "ScamGuard"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Database
    DATABASE_URL: str = "sqlite:///./scamguard.db"

    # AI Classifier (OpenAI-compatible chat completions); disabled without a key
    AI_API_KEY: Optional[str] = None
    AI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    AI_MODEL: str = "gpt-4"
    AI_TIMEOUT: int = 20
    AI_TEMPERATURE: float = 0.2
    AI_MAX_TOKENS: int = 500

    # Scan Storage
    MAX_STORED_CONTENT: int = 1000
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
