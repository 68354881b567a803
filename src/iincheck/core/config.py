"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class DatabaseConfig(BaseSettings):
    """Relational store holding registered persons."""

    model_config = {"env_prefix": "IINCHECK_DB_", "env_file": ".env", "extra": "ignore"}

    url: str = ""  # Full SQLAlchemy URL, wins over the individual fields
    user: str = "postgres"
    password: str = "qwerty"
    name: str = "postgres"
    host: str = "postgres"
    port: int = 5432
    sslmode: str = "disable"
    pool_size: int = 5
    create_schema: bool = True

    @property
    def sqlalchemy_url(self) -> str:
        if self.url:
            return self.url
        return (
            f"postgresql+psycopg2://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}?sslmode={self.sslmode}"
        )


class ServerConfig(BaseSettings):
    """HTTP server bind address."""

    model_config = {"env_prefix": "IINCHECK_SERVER_", "env_file": ".env", "extra": "ignore"}

    host: str = "0.0.0.0"
    port: int = 8080


class IINPolicyConfig(BaseSettings):
    """IIN decoding policy switches."""

    model_config = {"env_prefix": "IINCHECK_IIN_", "env_file": ".env", "extra": "ignore"}

    # Accept control digit 0 when both weight tables give remainder 10.
    # Off until product signs off on it.
    fallback_ten_as_zero: bool = False


class StressTestConfig(BaseSettings):
    """Load-test client configuration."""

    model_config = {"env_prefix": "IINCHECK_STRESS_", "env_file": ".env", "extra": "ignore"}

    server_url: str = "http://server:8080"
    num_workers: int = 10
    num_requests: int = 100
    timeout: float = 5.0


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "IINCHECK_", "env_file": ".env", "extra": "ignore"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: LogLevel = "INFO"

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    iin: IINPolicyConfig = Field(default_factory=IINPolicyConfig)
    stress: StressTestConfig = Field(default_factory=StressTestConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
