"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (SPLYNX_BASE_URL,
GOOGLE_MAPS_API_KEY, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Splynx
    splynx_base_url: str = Field(
        default="https://splynx.example.com/api/2.0",
        validation_alias="SPLYNX_BASE_URL",
    )
    splynx_api_key: str = Field(default="", validation_alias="SPLYNX_API_KEY")
    splynx_api_secret: str = Field(default="", validation_alias="SPLYNX_API_SECRET")

    # Geocoding
    google_maps_api_key: str = Field(default="", validation_alias="GOOGLE_MAPS_API_KEY")
    geocoding_country_code: str = Field(default="nz", validation_alias="GEOCODING_COUNTRY_CODE")
    geocoder_user_agent: str = Field(
        default="Splynx-API-Client/1.0",
        validation_alias="GEOCODER_USER_AGENT",
    )
    nominatim_min_interval: float = Field(default=1.0, validation_alias="NOMINATIM_MIN_INTERVAL")

    # App
    http_timeout: float = Field(default=10.0, validation_alias="HTTP_TIMEOUT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("splynx_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def crm_configured(self) -> bool:
        return bool(self.splynx_api_key and self.splynx_api_secret)


settings = Settings()
