from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "Tech Fest Admin API"
    APP_VERSION: str = "1.0.0"

    # Database URL (read from .env file)
    DATABASE_URL: str = ''

    # JWT Authentication settings
    JWT_SECRET_KEY: str = 'default-secret-key-change-in-production'
    JWT_ALGORITHM: str = 'HS256'
    JWT_EXPIRE_DAYS: int = 30

    # Client URL for CORS
    CLIENT_URL: str = 'http://localhost:3000'
    ADDITIONAL_CORS_ORIGINS: str = ''

    LOG_LEVEL: str = 'INFO'

    model_config = SettingsConfigDict(env_file=".env", extra='allow')

    @property
    def DB_URL(self) -> str:
        if self.ENV_MODE == "dev":
            return self.DEV_DB_URL
        if self.DATABASE_URL:
            return self._with_driver(self.DATABASE_URL)
        return '{}://{}:{}@{}:{}/{}'.format(
            self.DB_ENGINE,
            self.DB_USERNAME,
            self.DB_PASS,
            self.DB_HOST,
            self.DB_PORT,
            self.DB_NAME
        )

    @staticmethod
    def _with_driver(url: str) -> str:
        # Bare postgresql:// URLs default to psycopg2; use psycopg 3 instead
        if url.startswith("postgresql://"):
            URL_split = url.split("://", 1)
            return f"{URL_split[0]}+psycopg://{URL_split[1]}"
        return url

    @property
    def CORS_ORIGINS(self) -> list[str]:
        origins = [
            self.CLIENT_URL,
            "http://localhost",
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
        if self.ADDITIONAL_CORS_ORIGINS:
            origins.extend(origin.strip() for origin in self.ADDITIONAL_CORS_ORIGINS.split(","))
        # Remove empty strings and duplicates, keep order stable
        return list(dict.fromkeys(origin for origin in origins if origin))

class DevSettings(Settings):
    # Environment mode: 'dev' or 'prod'
    ENV_MODE: str = 'dev'

    @property
    def DEV_DB_URL(self) -> str:
        # Fall back to a local SQLite file when no DATABASE_URL is provided
        return self._with_driver(self.DATABASE_URL) if self.DATABASE_URL else "sqlite:///./dev.db"

    model_config = SettingsConfigDict(env_file=".env", extra='allow')

class ProdSettings(Settings):
    # Environment mode: 'dev' or 'prod'
    ENV_MODE: str = 'prod'

    # Database settings for production
    DB_ENGINE: str = 'postgresql+psycopg'
    DB_USERNAME: str = ''
    DB_PASS: str = ''
    DB_HOST: str = ''
    DB_PORT: str = ''
    DB_NAME: str = ''

    model_config = SettingsConfigDict(env_file=".env", extra='allow')

def get_settings(env_mode: str = "dev"):
    if env_mode == "dev":
        return DevSettings()
    return ProdSettings()
