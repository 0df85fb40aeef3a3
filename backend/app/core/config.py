from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Tirta Billing API"
    version: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    APP_DATABASE_DSN: str = "sqlite:////tmp/tirta.db"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Billing rules
    LATE_FEES_ENABLED: bool = False
    INVOICE_DUE_DAY: int = 20  # day of the month following the usage month
    INVOICE_TOTAL_MAX: int = 999_999_999

    # Meter reading limits
    METER_READING_MAX: int = 99_999_999  # 8 digit meter
    MONTHLY_USAGE_MAX_M3: int = 1000


settings = Settings()
