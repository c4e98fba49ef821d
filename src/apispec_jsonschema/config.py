from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Treat a mistyped Size min/max or Pattern regexp as absent instead of
    # raising. Mandatory keys (Length min/max, Min/Max value) always raise.
    lenient_configuration: bool = False

    model_config = SettingsConfigDict(
        env_prefix="APISPEC_",
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
