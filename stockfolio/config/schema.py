"""Pydantic models for stockfolio.yaml validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from stockfolio.config.defaults import (
    DISPLAY_DEFAULTS,
    FINANCE_API_DEFAULTS,
    STORAGE_DEFAULTS,
)


class StorageConfig(BaseModel):
    data_dir: str = STORAGE_DEFAULTS["data_dir"]
    file_name: str = STORAGE_DEFAULTS["file_name"]

    @field_validator("file_name")
    @classmethod
    def file_name_is_bare(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"file_name must be a bare file name, got {v!r}")
        return v


class FinanceApiConfig(BaseModel):
    base_url: str = FINANCE_API_DEFAULTS["base_url"]
    timeout: float = Field(default=FINANCE_API_DEFAULTS["timeout"], gt=0)
    region: str = FINANCE_API_DEFAULTS["region"]
    lang: str = FINANCE_API_DEFAULTS["lang"]

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class DisplayConfig(BaseModel):
    decimals: int = Field(default=DISPLAY_DEFAULTS["decimals"], ge=0, le=8)
    color: bool = DISPLAY_DEFAULTS["color"]
    placeholder: str = DISPLAY_DEFAULTS["placeholder"]


class StockfolioConfig(BaseModel):
    """Root configuration model."""

    version: int = 1
    storage: StorageConfig = Field(default_factory=StorageConfig)
    finance_api: FinanceApiConfig = Field(default_factory=FinanceApiConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
