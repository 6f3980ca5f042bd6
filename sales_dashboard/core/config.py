from typing import List
from decouple import config, Csv


class Settings:
    # --- Database ---
    DB_USER: str = config("DB_USER", default="postgres")
    DB_PASSWORD: str = config("DB_PASSWORD", default="postgres")
    DB_NAME: str = config("DB_NAME", default="transactions")
    DB_HOST: str = config("DB_HOST", default="localhost")
    DB_PORT: int = config("DB_PORT", default=5432, cast=int)
    DATABASE_URL_OVERRIDE: str = config("DATABASE_URL", default="")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (
            f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    # --- Seed data ---
    SEED_URL: str = config(
        "SEED_URL",
        default="https://s3.amazonaws.com/roxiler.com/product_transaction.json",
    )
    SEED_TIMEOUT: float = config("SEED_TIMEOUT", default=30.0, cast=float)
    SEED_ON_STARTUP: bool = config("SEED_ON_STARTUP", default=True, cast=bool)
    SEED_FAIL_FAST: bool = config("SEED_FAIL_FAST", default=False, cast=bool)

    # --- HTTP ---
    API_PREFIX: str = config("API_PREFIX", default="/api")
    HOST: str = config("HOST", default="0.0.0.0")
    PORT: int = config("PORT", default=3000, cast=int)

    # --- Logging & Debug ---
    SQL_ECHO: bool = config("SQL_ECHO", default=False, cast=bool)
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO").upper()
    SQL_LOG_LEVEL: str = config("SQL_LOG_LEVEL", default="WARNING").upper()
    UVICORN_LOG_LEVEL: str = config("UVICORN_LOG_LEVEL", default="info").upper()
    LOG_DIR: str = config("LOG_DIR", default="logs")

    # --- CORS ---
    CORS_ORIGINS: List[str] = config(
        "CORS_ORIGINS",
        default="http://localhost:5173,http://127.0.0.1:5173",
        cast=Csv(),
    )


settings = Settings()
