"""Application configuration."""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration loaded from environment variables."""
    
    # API settings
    host: str = "0.0.0.0"
    port: int = 8000
    
    # Document store HTTP data API
    document_api_url: str = "http://localhost:8080/api/v1"
    document_api_key: str = ""
    document_data_source: str = "Cluster0"
    document_database: str = "athletes"
    
    # Leaderboard view used when the request carries no view parameter
    default_leaderboard_view: str = "district"
    
    # Identity fallbacks
    default_avatar: str = "/defaultImg.png"
    
    # Athlete ids are document store object ids
    athlete_id_pattern: str = r"^[0-9a-fA-F]{24}$"
    
    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            document_api_url=os.getenv(
                "DOCUMENT_API_URL",
                "http://localhost:8080/api/v1"
            ),
            document_api_key=os.getenv("DOCUMENT_API_KEY", ""),
            document_data_source=os.getenv("DOCUMENT_DATA_SOURCE", "Cluster0"),
            document_database=os.getenv("DOCUMENT_DATABASE", "athletes"),
            default_leaderboard_view=os.getenv("LEADERBOARD_DEFAULT_VIEW", "district"),
            default_avatar=os.getenv("DEFAULT_AVATAR", "/defaultImg.png"),
            athlete_id_pattern=os.getenv(
                "ATHLETE_ID_PATTERN",
                r"^[0-9a-fA-F]{24}$"
            ),
        )
