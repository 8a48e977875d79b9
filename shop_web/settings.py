from pydantic_settings import BaseSettings, SettingsConfigDict


class WebSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env', env_file_encoding='utf-8', extra='ignore'
    )

    API_BASE_URL: str = 'http://localhost:3000'
    PORT: int = 3001
    REQUEST_TIMEOUT: float = 10
    LOG_LEVEL: str = 'INFO'
