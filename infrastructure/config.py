from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="CompoundSearch", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")

    # PubChem
    pubchem_pug_url: str = Field(
        default="https://pubchem.ncbi.nlm.nih.gov/rest/pug",
        validation_alias="PUBCHEM_PUG_URL",
    )
    pubchem_autocomplete_url: str = Field(
        default="https://pubchem.ncbi.nlm.nih.gov/rest/autocomplete",
        validation_alias="PUBCHEM_AUTOCOMPLETE_URL",
    )
    pubchem_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias="PUBCHEM_TIMEOUT_SECONDS",
    )

    # Local catalog
    catalog_path: Path = Field(
        default=Path(__file__).resolve().parent / "catalog" / "popular_compounds.yaml",
        validation_alias="CATALOG_PATH",
    )
    local_result_limit: int = Field(
        default=10,
        ge=1,
        validation_alias="LOCAL_RESULT_LIMIT",
        description="Maximum number of local catalog matches per query.",
    )

    # Hybrid search
    search_debounce_ms: int = Field(
        default=200,
        ge=0,
        validation_alias="SEARCH_DEBOUNCE_MS",
        description="Quiet period after the last query change before the remote lookup runs.",
    )
    search_remote_limit: int = Field(
        default=50,
        ge=1,
        validation_alias="SEARCH_REMOTE_LIMIT",
        description="Number of suggestions requested from the autocomplete endpoint.",
    )
    short_query_candidate_limit: int = Field(
        default=10,
        ge=1,
        validation_alias="SHORT_QUERY_CANDIDATE_LIMIT",
    )
    suggestion_resolve_limit: int = Field(
        default=20,
        ge=1,
        validation_alias="SUGGESTION_RESOLVE_LIMIT",
        description="How many autocomplete suggestions are resolved to identifiers.",
    )


# Global settings instance
settings = Settings()
