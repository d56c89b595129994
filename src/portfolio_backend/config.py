"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    mail_sender: str
    mail_password: str
    mail_recipient: str
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    cors_origin: str = "https://leandro-hurtado-portfolio.netlify.app"
    app_name: str = "Leandro Portfolio backend"
    app_version: str = "1.0.0"
    invalid_body_message: str = (
        "Invalid request body, send a record or a list of records!"
    )
    error_message: str = "Could not retrieve records, please try again later!"
    contact_window_seconds: int = 300
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
