from decimal import Decimal
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore"
    )

    API_V1_STR: str = Field("/api", description="API prefix")
    ENV: str = Field(
        "dev", description="Application environment (dev, staging, production)"
    )

    DATABASE_URI: str = Field(..., description="Database URI for SQLAlchemy")
    AUTO_CREATE_TABLES: bool = Field(
        True, description="Create missing tables on startup"
    )

    SERVER_PORT: int = Field(3002, description="Port on which the server runs")
    PROJECT_NAME: str = Field("AutoAssist", description="Name of the project")
    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: ["*"], description="Allowed CORS origins"
    )

    BCRYPT_ROUNDS: int = Field(12, description="bcrypt work factor")

    # Ledger ids look like TX0042
    TRANSACTION_ID_PREFIX: str = "TX"
    TRANSACTION_ID_DIGITS: int = Field(4, ge=1)
    TRANSACTION_ID_MAX_ATTEMPTS: int = Field(25, ge=1)

    TOWING_FLAT_RATE: Decimal = Field(Decimal("500.00"), ge=0)
    BRIEF_QUOTE_PRICE: Decimal = Field(Decimal("5.00"), ge=0)
    DETAILED_QUOTE_PRICE: Decimal = Field(Decimal("15.00"), ge=0)

    @field_validator("DATABASE_URI")
    @classmethod
    def not_empty(cls, v, info):
        if not v:
            raise ValueError(f"{info.field_name} cannot be empty")
        return v


settings = Settings()
