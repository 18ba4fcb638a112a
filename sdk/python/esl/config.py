# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
Client configuration.

Data directory (default: ~/.esl, override with ESL_DATA):
    ~/.esl/
    ├── config.yaml   # Connection settings
    └── esl.key       # Account API key

Example config.yaml:
    base_url: https://sandbox.esignlive.com/api
    api_key_file: esl.key
    timeout: 30

The ESL_API_KEY and ESL_BASE_URL environment variables take precedence
over the files.
"""

import os
from dataclasses import dataclass
from typing import Optional

import yaml

from .exceptions import EslConfigError
from .transport import DEFAULT_TIMEOUT

DEFAULT_DATA_DIR = "~/.esl"
DEFAULT_KEY_FILE = "esl.key"


@dataclass
class ClientConfig:
    """Settings EslClient is constructed from"""
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT


def resolve_data_dir(data_dir: Optional[str] = None) -> str:
    """Resolve the data directory: argument > ESL_DATA > default."""
    data_dir = data_dir or os.environ.get("ESL_DATA") or DEFAULT_DATA_DIR
    return os.path.expanduser(data_dir)


def load_api_key(path: str) -> str:
    """
    Load the API key from file.

    Args:
        path: Path to the key file

    Returns:
        API key with surrounding whitespace removed
    """
    with open(path, "r") as f:
        return f.read().strip()


def load_config(data_dir: Optional[str] = None) -> ClientConfig:
    """
    Load client configuration from data_dir/config.yaml and the environment.

    Args:
        data_dir: Path to data directory (see resolve_data_dir)

    Returns:
        ClientConfig with values from file and environment, defaults for
        missing fields. Missing values are not an error here; EslClient
        checks what it needs.

    Raises:
        EslConfigError: If config.yaml exists but cannot be parsed
    """
    data_dir = resolve_data_dir(data_dir)
    config = ClientConfig()

    data = {}
    config_path = os.path.join(data_dir, "config.yaml")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise EslConfigError(f"Invalid {config_path}: {e}")
        if not isinstance(data, dict):
            raise EslConfigError(f"Invalid {config_path}: expected a mapping")

    if "base_url" in data:
        config.base_url = data["base_url"]
    if "timeout" in data:
        try:
            config.timeout = int(data["timeout"])
        except (TypeError, ValueError):
            raise EslConfigError(f"timeout must be an integer, got {data['timeout']!r}")

    key_path = os.path.join(data_dir, data.get("api_key_file", DEFAULT_KEY_FILE))
    if os.path.exists(key_path):
        config.api_key = load_api_key(key_path)

    # Environment wins over files
    config.api_key = os.environ.get("ESL_API_KEY") or config.api_key
    config.base_url = os.environ.get("ESL_BASE_URL") or config.base_url

    return config
