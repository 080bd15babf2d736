"""
Library configuration from environment variables.
Input-safe: no user values in defaults or logs.
"""
from functools import lru_cache
from typing import List, Literal, Optional
from zoneinfo import available_timezones

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from SANITIZE_UTILS_* environment variables."""

    # Environment
    service_env: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        description="Embedding environment, drives the default log level"
    )
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = Field(
        default=None,
        description="Explicit log level (overrides the service_env default)"
    )

    # Amount normalization defaults
    amount_decimal_separator: str = Field(
        default=".",
        min_length=1,
        description="Decimal separator expected in raw amounts"
    )
    amount_thousands_separator: str = Field(
        default=",",
        description="Thousands separator stripped from raw amounts ('' to disable)"
    )
    amount_decimals: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Number of decimal digits in normalized amounts"
    )
    amount_allow_negative: bool = Field(
        default=True,
        description="Keep the sign of negative amounts (False = absolute value)"
    )

    # Validation defaults
    password_min_length: int = Field(
        default=8,
        ge=1,
        le=256,
        description="Default minimum length for strong passwords"
    )
    date_format: str = Field(
        default="%Y-%m-%d",
        min_length=1,
        description="strptime/strftime format used for dates"
    )
    time_format: str = Field(
        default="%H:%M",
        min_length=1,
        description="strptime/strftime format used for times"
    )
    default_timezone: str = Field(
        default="UTC",
        description="Timezone returned when a timezone value is not registered"
    )
    html_allowed_tags: List[str] = Field(
        default=[
            "a", "abbr", "b", "blockquote", "br", "code", "em", "i",
            "li", "ol", "p", "pre", "strong", "ul",
        ],
        description="Tags kept by the default HTML allow-list"
    )

    @field_validator("amount_thousands_separator", mode="after")
    @classmethod
    def validate_separators_differ(cls, v: str, info) -> str:
        """Thousands and decimal separators must not collide."""
        decimal = info.data.get("amount_decimal_separator", ".")
        if v and v == decimal:
            raise ValueError(
                "amount_thousands_separator must differ from amount_decimal_separator"
            )
        return v

    @field_validator("default_timezone", mode="after")
    @classmethod
    def validate_default_timezone(cls, v: str) -> str:
        """Default timezone must be a registered zone name."""
        if v not in available_timezones():
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("html_allowed_tags", mode="after")
    @classmethod
    def normalize_allowed_tags(cls, v: List[str]) -> List[str]:
        return [tag.strip().lower() for tag in v if tag and tag.strip()]

    class Config:
        env_prefix = "SANITIZE_UTILS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
