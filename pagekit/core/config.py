from functools import lru_cache
from typing import Any, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_CORS = ["http://localhost:3000", "http://localhost:5173"]


def _parse_cors_origins(v: Any) -> List[str]:
    if v is None or v == "":
        return _DEFAULT_CORS.copy()
    if isinstance(v, list):
        return [x for x in v if isinstance(x, str) and x.strip()]
    s = str(v).strip()
    if not s:
        return _DEFAULT_CORS.copy()
    if s.startswith("["):
        import orjson
        try:
            out = orjson.loads(s)
        except orjson.JSONDecodeError:
            return _DEFAULT_CORS.copy()
        return [x for x in out if isinstance(x, str) and x.strip()] or _DEFAULT_CORS.copy()
    return [x.strip() for x in s.split(",") if x.strip()] or _DEFAULT_CORS.copy()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App
    env: str = Field(default="development", description="ENV")
    debug: bool = Field(default=False, description="DEBUG")

    # CORS: env as string, exposed as list
    cors_origins_raw: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="CORS_ORIGINS",
        description="Comma-separated or JSON list",
    )

    @property
    def cors_origins(self) -> List[str]:
        return _parse_cors_origins(getattr(self, "cors_origins_raw", None))

    # Paging defaults
    default_limit: int = Field(default=20, ge=1, alias="PAGEKIT_DEFAULT_LIMIT")
    max_limit: int = Field(default=200, ge=1, alias="PAGEKIT_MAX_LIMIT")
    default_modulus: int = Field(default=8, ge=0, alias="PAGEKIT_DEFAULT_MODULUS")

    # JSON object of template overrides, loaded into every helper the API builds
    templates_file: str | None = Field(default=None, alias="PAGEKIT_TEMPLATES_FILE")


@lru_cache
def get_settings() -> Settings:
    return Settings()
