"""Storefront Configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8082
    api_prefix: str = "/v1"

    # Demo catalog and users on startup
    seed_demo_data: bool = True

    # JWT Configuration
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_expiration_minutes: int = 240

    # Account defaults
    default_wallet_money: float = 500
    default_address: str = "ADDRESS_NOT_SET"
    default_payment_option: str = "PAYMENT_OPTION_DEFAULT"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
