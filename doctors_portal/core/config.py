from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Doctors Portal"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    PORT: int = 5000

    # Database - MongoDB document store
    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "doctors_portal"
    TEST_DATABASE_NAME: str = "doctors_portal_test"
    MONGODB_TIMEOUT_MS: int = 5000

    # Security
    # The Node service exported the secret as ACCESS_TOKEN_SECREST
    SECRET_KEY: str = Field(
        default="your-secret-key-change-this-in-production",
        validation_alias=AliasChoices(
            "SECRET_KEY", "ACCESS_TOKEN_SECRET", "ACCESS_TOKEN_SECREST"
        ),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    @property
    def get_database_name(self):
        """Return the database name to use, separate for tests"""
        if self.TESTING:
            return self.TEST_DATABASE_NAME
        return self.DATABASE_NAME

    class Config:
        env_file = ".env"
        case_sensitive = True
        populate_by_name = True

# Create settings instance
settings = Settings()
