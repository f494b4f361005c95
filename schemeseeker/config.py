"""
Configuration settings for SchemeSeeker
"""
from pathlib import Path
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "schemes.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Application Configuration
    app_name: str = Field(default="SchemeSeeker API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    
    # API Configuration
    api_prefix: str = Field(default="")
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:5173")
    
    # Catalog Configuration
    catalog_path: str = Field(default=str(DEFAULT_CATALOG_PATH))
    
    # Language Configuration
    default_language: str = Field(default="en")
    supported_languages: str = Field(default="en,hi,te")
    
    # Recommendation / chat limits
    recommendation_limit: int = Field(default=10, ge=1)
    chat_scheme_limit: int = Field(default=5, ge=1)
    max_quick_replies: int = Field(default=6, ge=1, le=6)
    
    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]
    
    def get_supported_languages_list(self) -> List[str]:
        """Get supported language codes as a list"""
        return [code.strip().lower() for code in self.supported_languages.split(',') if code.strip()]
    
    model_config = SettingsConfigDict(
        env_prefix="SCHEMESEEKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()
