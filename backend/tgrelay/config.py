from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "TGRELAY_"}

    api_base_url: str = "https://api.telegram.org"
    request_timeout_s: float = 10.0
    default_delay_ms: float = 100
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
