"""
Amount normalization configuration.
Defaults come from Settings; caller overrides are overlaid field by field.
"""
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

from sanitize_utils.core.config import get_settings


class AmountConfig(BaseModel):
    """How raw amounts are read and formatted."""

    decimal_separator: str = Field(
        default=".",
        min_length=1,
        description="Decimal separator used in the raw input"
    )
    thousands_separator: str = Field(
        default=",",
        description="Thousands separator removed from the raw input ('' for none)"
    )
    decimals: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Number of decimal digits in the output"
    )
    allow_negative: bool = Field(
        default=True,
        description="False turns negative amounts into their absolute value"
    )

    @field_validator("thousands_separator", mode="after")
    @classmethod
    def separators_differ(cls, v: str, info) -> str:
        """Thousands separator must not equal the decimal separator."""
        decimal = info.data.get("decimal_separator", ".")
        if v and v == decimal:
            raise ValueError("thousands_separator must differ from decimal_separator")
        return v

    class Config:
        frozen = True

    @classmethod
    def defaults(cls) -> "AmountConfig":
        """Config built from the library settings."""
        settings = get_settings()
        return cls(
            decimal_separator=settings.amount_decimal_separator,
            thousands_separator=settings.amount_thousands_separator,
            decimals=settings.amount_decimals,
            allow_negative=settings.amount_allow_negative,
        )

    @classmethod
    def resolve(
        cls,
        overrides: Optional[Union["AmountConfig", Mapping[str, Any]]] = None,
    ) -> "AmountConfig":
        """
        Overlay caller-supplied fields on the defaults.

        Args:
            overrides: a full AmountConfig (used as is), a mapping with any
                subset of the fields (unknown keys are ignored), or None.

        Raises:
            pydantic.ValidationError: if the merged config is invalid.
        """
        if isinstance(overrides, AmountConfig):
            return overrides

        base = cls.defaults()
        if not overrides:
            return base

        decimal_separator = overrides.get("decimal_separator", base.decimal_separator)
        if "thousands_separator" in overrides:
            thousands_separator = overrides["thousands_separator"]
        elif decimal_separator == base.thousands_separator:
            # {"decimal_separator": ","} means the European layout: "1.234,56"
            thousands_separator = (
                base.decimal_separator if base.decimal_separator != decimal_separator else ""
            )
        else:
            thousands_separator = base.thousands_separator

        return cls(
            decimal_separator=decimal_separator,
            thousands_separator=thousands_separator,
            decimals=overrides.get("decimals", base.decimals),
            allow_negative=overrides.get("allow_negative", base.allow_negative),
        )
