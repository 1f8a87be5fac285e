"""Configuration management for the application."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    app_title: str = "Invoicing"
    app_version: str = "1.0.0"
    
    # Receipt formatting
    currency_symbol: str = "$"
    
    # Logging
    log_level: str = "WARNING"
    
    # Console: answers accepted when confirming "clear invoice"
    confirm_words: list[str] = ["s", "si", "y", "yes"]
    
    class Config:
        env_file = ".env"
        env_prefix = "INVOICING_"
        case_sensitive = False


settings = Settings()
