"""Configuration loading and key construction."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from jwtsign.config.schema import Config, TokenConfig
from jwtsign.errors import CryptoError
from jwtsign.keys import RSAKey
from jwtsign.token import Jwt

# Default location: ~/.jwtsign/config.json
DEFAULT_CONFIG_PATH = Path.home() / ".jwtsign" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file, or defaults if the file does not exist.

    Invalid JSON or values that fail validation are logged and re-raised.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return Config()

    try:
        with open(path) as f:
            data = json.load(f)
        return Config.model_validate(data)
    except ValueError as e:
        logger.error(f"Invalid config file {path}: {e}")
        raise


def load_key(config: TokenConfig) -> RSAKey:
    """Build the signing key from inline PEM or from the configured file."""
    if config.private_key_pem:
        return RSAKey.from_str(config.private_key_pem)
    if config.private_key_path:
        return RSAKey.from_pem(config.private_key_path)
    raise CryptoError("No private key configured (set privateKeyPem or privateKeyPath)")


def build_token(body: Any, config: TokenConfig, key: RSAKey | None = None) -> Jwt:
    """Bind ``body`` to the configured key and algorithm.

    Pass ``key`` to reuse an already-loaded key across many tokens.
    """
    return Jwt(body, key or load_key(config), config.algorithm)
