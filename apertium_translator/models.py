import os
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Minimum key length the service accepts
API_KEY_MIN_LENGTH = 27


class ApertiumConfig(BaseModel):
    # Immutable once handed to a client
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    referrer: Optional[str] = None
    base_url: str = "http://api.apertium.org/json"
    timeout: Optional[float] = Field(default=5.0, gt=0)
    redis_url: Optional[str] = None
    cache_ttl: int = Field(default=604800, ge=0)  # 7 days (translations are deterministic)

    @field_validator("timeout", mode="before")
    @classmethod
    def _zero_or_none_disables_timeout(cls, value):
        """'none', '0' and 0 all mean no timeout; anything else must be a positive number."""
        if isinstance(value, str):
            if value.strip().lower() == "none":
                return None
            try:
                value = float(value)
            except ValueError:
                raise ValueError(f"timeout must be a number or 'none', got {value!r}")
        if not isinstance(value, bool) and isinstance(value, (int, float)) and value == 0:
            return None
        return value

    @classmethod
    def from_env(cls) -> "ApertiumConfig":
        """Builds a config from APERTIUM_* environment variables and REDIS_URL."""
        values = {
            "api_key": os.getenv("APERTIUM_API_KEY"),
            "referrer": os.getenv("APERTIUM_REFERRER"),
            "redis_url": os.getenv("REDIS_URL"),
        }
        base_url = os.getenv("APERTIUM_BASE_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.getenv("APERTIUM_TIMEOUT")
        if timeout:
            values["timeout"] = timeout
        return cls(**values)

    def with_key(self, api_key: str) -> "ApertiumConfig":
        return self.model_copy(update={"api_key": api_key})

    def with_referrer(self, referrer: str) -> "ApertiumConfig":
        return self.model_copy(update={"referrer": referrer})


class Language(str, Enum):
    AFRIKAANS = "af"
    ARAGONESE = "an"
    ASTURIAN = "ast"
    BASQUE = "eu"
    BRETON = "br"
    BULGARIAN = "bg"
    CATALAN = "ca"
    DANISH = "da"
    ENGLISH = "en"
    ESPERANTO = "eo"
    FRENCH = "fr"
    GALICIAN = "gl"
    ICELANDIC = "is"
    ITALIAN = "it"
    MACEDONIAN = "mk"
    NORWEGIAN_BOKMAL = "nb"
    NORWEGIAN_NYNORSK = "nn"
    OCCITAN = "oc"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    SPANISH = "es"
    SWEDISH = "sv"
    WELSH = "cy"

    def __str__(self) -> str:
        return self.value


class LanguagePair(BaseModel):
    source: str
    target: str

    @classmethod
    def of(cls, source, target) -> "LanguagePair":
        """Accepts Language members or raw language codes."""
        return cls(source=str(source), target=str(target))

    def to_param(self) -> str:
        return f"{self.source}|{self.target}"
