from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://192.168.1.10:5173",
    "https://buildezyservices.sbs",
    "https://www.buildezyservices.sbs",
    "https://buildezy-frontend.vercel.app",
    "https://buildezy-frontend-o9sypvabb-buildezy-devs-projects.vercel.app",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = Field(default="Buildezy Backend", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # The bind address is fixed; only the port is configurable.
    host: str = "0.0.0.0"
    port: int = Field(default=5000, alias="PORT")

    # Database: either a full connection string or discrete PG* parameters
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    pghost: str = Field(default="localhost", alias="PGHOST")
    pgport: int = Field(default=5432, alias="PGPORT")
    pguser: str = Field(default="postgres", alias="PGUSER")
    pgpassword: str | None = Field(default=None, alias="PGPASSWORD")
    pgdatabase: str = Field(default="postgres", alias="PGDATABASE")

    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=10, alias="DB_MAX_OVERFLOW")
    db_create_tables: bool = Field(default=False, alias="DB_CREATE_TABLES")

    # JSON list in the environment, e.g. CORS_ORIGINS='["https://a.example"]'
    cors_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS), alias="CORS_ORIGINS"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def resolved_log_level(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.app_env == "development" else "INFO"

    @property
    def sqlalchemy_url(self) -> URL:
        """Async SQLAlchemy URL for the configured database.

        Bare ``postgres://`` / ``postgresql://`` connection strings (as handed
        out by most hosting providers) are switched to the asyncpg driver.
        libpq-style TLS query options are dropped; asyncpg rejects them and TLS
        is configured through ``connect_args`` instead.
        """
        if not self.database_url:
            return URL.create(
                "postgresql+asyncpg",
                username=self.pguser,
                password=self.pgpassword,
                host=self.pghost,
                port=self.pgport,
                database=self.pgdatabase,
            )
        url = make_url(self.database_url)
        if url.drivername in ("postgres", "postgresql"):
            url = url.set(drivername="postgresql+asyncpg")
        if url.get_backend_name() == "postgresql":
            url = url.difference_update_query(["sslmode", "ssl"])
        return url

    @property
    def database_ssl(self) -> bool:
        """TLS is required whenever a hosted connection string is configured."""
        return bool(self.database_url) and self.sqlalchemy_url.get_backend_name() == "postgresql"


settings = Settings()
