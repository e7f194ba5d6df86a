"""
Settings Module
===============

Pydantic-based configuration with environment variable loading.

Wire-contract constants (mint amounts, ceiling, network id, fee split) live
in ``heat.constants`` and are deliberately not configurable here.

Version: 0.1.0
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class VerifierMode(str, Enum):
    """How burn proofs are verified."""

    MOCK = "mock"
    ONCHAIN = "onchain"


class NullifierBackend(str, Enum):
    """Where consumed nullifiers are recorded."""

    MEMORY = "memory"
    REDIS = "redis"


class ChainSettings(BaseSettings):
    """Proof verifier configuration."""

    model_config = SettingsConfigDict(env_prefix="CHAIN_")

    verifier_mode: VerifierMode = VerifierMode.MOCK

    # Settlement chain (for onchain mode)
    rpc_url: str = ""
    verifier_contract_address: str = ""
    verifier_timeout_seconds: float = 30.0

    # Mock verifier behaviour
    mock_accept: bool = False


class RoleSettings(BaseSettings):
    """Initial holders of the privileged roles."""

    model_config = SettingsConfigDict(env_prefix="ROLES_")

    owner: str = "0x00000000000000000000000000000000000000A1"
    minter: str = "0x00000000000000000000000000000000000000A2"
    collector: str = "0x00000000000000000000000000000000000000A3"
    treasury: str = "0x00000000000000000000000000000000000000A4"


class RedisSettings(BaseSettings):
    """Redis configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    host: str = "localhost"
    port: int = 6379
    password: SecretStr = SecretStr("heat_redis_password")
    db: int = 0

    @property
    def url(self) -> str:
        """Generate Redis connection URL."""
        pwd = self.password.get_secret_value()
        return f"redis://:{pwd}@{self.host}:{self.port}/{self.db}"


class NullifierSettings(BaseSettings):
    """Nullifier store configuration."""

    model_config = SettingsConfigDict(env_prefix="NULLIFIER_")

    backend: NullifierBackend = NullifierBackend.MEMORY
    key_prefix: str = "heat:nullifier:"


class JWTSettings(BaseSettings):
    """JWT authentication configuration."""

    model_config = SettingsConfigDict(env_prefix="JWT_")

    secret_key: SecretStr = SecretStr("your-jwt-secret-key-min-32-chars-long")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(env_prefix="CORS_")

    origins: str = "http://localhost:3000,http://localhost:5173"
    allow_credentials: bool = True

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into list."""
        return [o.strip() for o in self.origins.split(",") if o.strip()]


class ServicePorts(BaseSettings):
    """Service port configuration."""

    claims: int = Field(default=8010, alias="CLAIMS_PORT")


class Settings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables with sensible defaults.
    Use the global `settings` singleton or call `get_settings()`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: LogLevel = LogLevel.INFO

    # Service ports
    ports: ServicePorts = Field(default_factory=ServicePorts)

    # Core collaborators
    chain: ChainSettings = Field(default_factory=ChainSettings)
    roles: RoleSettings = Field(default_factory=RoleSettings)
    nullifiers: NullifierSettings = Field(default_factory=NullifierSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)

    # Authentication
    jwt: JWTSettings = Field(default_factory=JWTSettings)

    # Security
    cors: CORSSettings = Field(default_factory=CORSSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Ensure log level is uppercase."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @model_validator(mode="after")
    def require_real_verifier_in_production(self) -> "Settings":
        """Refuse the mock verifier in production."""
        if self.is_production and self.chain.verifier_mode == VerifierMode.MOCK:
            raise ValueError(
                "CHAIN_VERIFIER_MODE=mock is not allowed in production; use onchain"
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton.
    """
    return Settings()
