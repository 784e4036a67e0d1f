from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "fakestore-server"
    APP_VERSION: str = "1.0.0"

    # Upstream Fake Store API
    FAKESTORE_API_URL: str = Field(default="https://fakestoreapi.com")
    FAKESTORE_TIMEOUT: float = Field(default=10.0, gt=0)  # seconds per request

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="console")  # console | json

    # Metrics
    ENABLE_METRICS: bool = Field(default=False)
    METRICS_PORT: int = Field(default=9090)

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = Field(default=True)
    RATE_LIMIT_REQUESTS: int = Field(default=100, gt=0)
    RATE_LIMIT_WINDOW: int = Field(default=60, gt=0)  # seconds

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

settings = Settings()
