from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Stripe
    STRIPE_API_BASE: str = "https://api.stripe.com"
    # Seed for the memory credential backend only; never read by the core
    STRIPE_API_KEY: str | None = None
    PAGE_SIZE: int = 100
    HTTP_TIMEOUT_SECONDS: float = 10.0
    # None = no cap (pagination runs until has_more is false)
    MAX_PAGES_PER_WINDOW: int | None = None

    # Calendar used to derive the day / week / month windows
    TIMEZONE: str = "UTC"
    WEEK_START: int = 0  # 0=Monday ... 6=Sunday
    CURRENCY: str = "USD"

    # Credential store: "memory" or "redis"
    CREDENTIAL_BACKEND: str = "memory"
    CREDENTIAL_KEY: str = "com.prismo.stripe-revenue.apikey"

    # Redis (only used by the redis credential backend)
    REDIS_URL: str = "redis://localhost:6379/0"

    # Scheduler
    AUTO_REFRESH: bool = True
    REFRESH_INTERVAL_SECONDS: int = 300

    # App
    APP_NAME: str = "Stripe Revenue Tracker"
    DEBUG: bool = False


settings = Settings()
