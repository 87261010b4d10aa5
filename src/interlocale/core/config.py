from functools import lru_cache
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def parse_env_vars(v: Any) -> tuple[str, ...]:
    if isinstance(v, str):
        return tuple(i.strip() for i in v.split(",") if i.strip())
    if isinstance(v, list | tuple):
        return tuple(v)
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INTERLOCALE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    DEBUG: bool = False

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Environment variables consulted, in order, when the preferred
    # locale is picked up automatically
    LOCALE_ENV_VARS: Annotated[
        tuple[str, ...], NoDecode, BeforeValidator(parse_env_vars)
    ] = ("LC_ALL", "LANG")

    @field_validator("LOCALE_ENV_VARS", mode="after")
    @classmethod
    def validate_locale_env_vars(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Require at least one variable to read the locale from."""
        if not v:
            raise ValueError("LOCALE_ENV_VARS must name at least one variable")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()

