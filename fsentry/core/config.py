from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FSENTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="fsentry", description="Application name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment mode"
    )

    root_path: Path = Field(
        default=Path("./fsentry_data"), description="Default root of the object store"
    )
    pretty_json: bool = Field(
        default=False, description="Write tab-indented JSON metadata files"
    )

    max_identifier_length: int = Field(
        default=200, gt=0, description="Maximum length of a derived identifier"
    )
    extra_reserved_names: List[str] = Field(
        default_factory=list,
        description="Additional names that must never become identifiers",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log output format"
    )

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v, info):
        if info.data.get("environment") == "production":
            return "json"
        return v

    @field_validator("extra_reserved_names")
    @classmethod
    def lowercase_reserved_names(cls, v: List[str]) -> List[str]:
        return [name.lower() for name in v]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
