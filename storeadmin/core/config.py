from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Auth
    SECRET_KEY: str
    SESSION_COOKIE_NAME: str = "session_token"

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str
    DB_PASS: str
    DB_NAME: str
    DB_POOL_SIZE: int = 5

    DATABASE_URL: Optional[str] = None

    # TLS client certificates, relative to the working directory
    DB_SSL_CA: str = "certs/server-ca.pem"
    DB_SSL_CERT: str = "certs/client-cert.pem"
    DB_SSL_KEY: str = "certs/client-key.pem"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
