"""Configuration for jwtsign."""

from jwtsign.config.loader import build_token, load_config, load_key
from jwtsign.config.schema import Config, TokenConfig

__all__ = ["Config", "TokenConfig", "build_token", "load_config", "load_key"]
