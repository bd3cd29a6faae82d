"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jwtsign.algorithms import DEFAULT_ALGORITHM, Algorithm


class Base(BaseModel):
    """Accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TokenConfig(Base):
    """Signing key and algorithm."""

    algorithm: str = DEFAULT_ALGORITHM.value
    private_key_path: str = ""  # PEM file, ~ is expanded
    private_key_pem: str = ""  # Inline PEM, takes precedence over the path

    @field_validator("algorithm")
    @classmethod
    def _known_algorithm(cls, v: str) -> str:
        try:
            return Algorithm(v.strip().upper()).value
        except ValueError:
            raise ValueError(f"unknown algorithm '{v}'") from None


class Config(Base):
    """Root configuration for jwtsign."""

    token: TokenConfig = Field(default_factory=TokenConfig)
