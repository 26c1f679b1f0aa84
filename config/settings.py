"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Database Configuration
    mongo_uri: str = "mongodb://127.0.0.1:27017/exercisetracker"
    default_database: str = "exercisetracker"
    
    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000
    
    # Static landing page
    public_dir: str = "public"
    
    # CORS Configuration
    cors_origins: List[str] = ["*"]
    
    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def database_name(self) -> str:
        """Database name taken from the last path segment of the Mongo URI."""
        path = self.mongo_uri.split("://", 1)[-1]
        if "/" not in path:
            return self.default_database
        name = path.split("/", 1)[1].split("?", 1)[0].strip("/")
        return name or self.default_database


# Global settings instance
settings = Settings()
