from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SR_",
    )

    # Simulation defaults (used when the CLI omits an option)
    default_drift_pct: float = 3.0
    default_volatility_pct: float = 17.0
    default_months: int = 12

    # "single_draw" reproduces the reference tool; "box_muller" uses two draws
    normal_method: str = "single_draw"
    random_seed: int | None = None

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"
