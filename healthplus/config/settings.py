from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (and ``.env``).
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "HealthCare+ Portal API"
    PROJECT_DESCRIPTION: str = "Appointments, teleconsultation and pharmacy state engine"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    # Simulated network latency (seconds) per workflow
    LOGIN_DELAY: float = Field(0.8, ge=0, description="Simulated latency of login")
    REGISTER_DELAY: float = Field(1.0, ge=0, description="Simulated latency of sending the one-time code")
    BOOKING_DELAY: float = Field(1.2, ge=0, description="Simulated latency of booking an appointment")
    CANCEL_DELAY: float = Field(0.8, ge=0, description="Simulated latency of cancelling an appointment")
    CONSULTATION_START_DELAY: float = Field(0.5, ge=0, description="Simulated latency of joining a call")
    CHECKOUT_DELAY: float = Field(1.5, ge=0, description="Simulated latency of checkout")

    # Teleconsultation
    CALL_TIMER_TICK_SECONDS: float = Field(1.0, gt=0, description="Seconds between call-duration ticks")
    CHAT_REPLY_DELAY: float = Field(2.0, ge=0, description="Delay before the doctor's canned chat reply")

    # Pharmacy
    FREE_SHIPPING_THRESHOLD: float = Field(1000, ge=0, description="Subtotal above which shipping is free")
    SHIPPING_FEE: float = Field(99, ge=0, description="Flat shipping fee below the threshold")
    DELIVERY_DAYS: int = Field(5, ge=0, description="Days until estimated delivery")
    LOW_STOCK_THRESHOLD: int = Field(10, ge=0, description="Stock level flagged as low on dashboards")

    # Accounts (simulated; not a security boundary)
    SESSION_LIFETIME_DAYS: int = Field(7, ge=1, description="Lifetime of a mock session token")
    ADMIN_EMAIL_MARKER: str = Field("admin", description="Emails containing this marker log in as admin")

    # Persistence
    STORAGE_BACKEND: Literal["memory", "redis"] = Field("memory", description="Key/value backend for user and cart")
    USER_STORAGE_KEY: str = Field("healthcare_user", description="Key holding the current user")
    CART_STORAGE_KEY: str = Field("healthcare_cart", description="Key holding the current cart")

    # Redis Settings
    REDIS_HOST: str = Field("localhost", description="Redis host")
    REDIS_PORT: int = Field(6379, description="Redis port")
    REDIS_DB: int = Field(0, description="Redis database")
    REDIS_PASSWORD: str | None = Field(None, description="Redis password")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @computed_field
    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("development", "dev", "local")


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
