from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Frame Catalog"

    # Database
    DATABASE_URL: str = "sqlite:///./catalog.db"
    SQL_ECHO: bool = False

    # Pages are served under this prefix, e.g. "/shop"
    BASE_PATH: str = "/"

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",     # vite dev server
    ]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="allow"
    )


settings = Settings()
