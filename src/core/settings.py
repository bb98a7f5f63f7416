"""Настройки процесса, загружаемые из окружения (pydantic-settings).

Переменные окружения с префиксом VAT_REGISTER_, например:
- VAT_REGISTER_LOG_LEVEL=DEBUG
- VAT_REGISTER_LOG_FORMAT=json
- VAT_REGISTER_MAX_INVOICE_AMOUNT=1000000
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.math.median import UINT32_MAX


class Settings(BaseSettings):
    """Настройки реестра и логирования."""

    model_config = SettingsConfigDict(
        env_prefix="VAT_REGISTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # Register
    max_invoice_amount: int = Field(default=UINT32_MAX, ge=0)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
