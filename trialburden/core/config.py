from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "TrialBurden"
    environment: str = "dev"
    log_level: str = "INFO"

    # Assumptions used when scoring booked appointments, which carry less
    # detail than a hand-built visit list.
    default_travel_minutes: float = 60.0
    default_window_days: float = 3.0
    default_duration_minutes: int = 60
    standard_blood_volume_ml: float = 30.0
    standard_infusion_hours: float = 1.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
