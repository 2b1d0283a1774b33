from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DATABASE_URL: str = "sqlite:///dictionary.db"
    SECRET_KEY: str
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    JWT_ACCESS_COOKIE_NAME: str = "access_token"
    JWT_COOKIE_DOMAIN: str | None = None
    JWT_COOKIE_SECURE: bool = False
    JWT_COOKIE_SAMESITE: str = "lax"
    JWT_COOKIE_CSRF_PROTECT: bool = True
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    ANALYSIS_MODEL: str = "gpt-4-turbo-preview"
    ANALYSIS_TEMPERATURE: float = 0.3
    ANALYSIS_TIMEOUT_SECONDS: float = 30.0

    LOG_LEVEL: str = "INFO"


settings = Settings()
