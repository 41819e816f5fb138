"""Configuration loading utilities."""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from sdk_tck.config.schema import TckSettings
from sdk_tck.utils.exceptions import ConfigError
from sdk_tck.utils.naming import to_env_format

PLACEHOLDER_SECRET = "***"

NETWORKS = ("local", "testnet")


def get_env_path() -> Path:
    """Get the default environment file path (`.env` in the working directory)."""
    return Path.cwd() / ".env"


def load_settings(env_file: Path | None = None) -> TckSettings:
    """
    Load settings from the process environment plus an optional env file.

    Args:
        env_file: Optional path to an env file. Uses `.env` in the working directory if not provided.

    Returns:
        Loaded settings object. Process environment wins over the file.
    """
    path = env_file or get_env_path()
    if path.exists():
        return TckSettings(_env_file=path)
    return TckSettings(_env_file=None)


def get_network_config(network: str, env_file: Path | None = None) -> dict[str, Any]:
    """
    Build the camelCase network config for ``local`` or ``testnet``.

    The env file is loaded into ``os.environ`` first without overriding values
    that are already set. Testnet needs a real operator identity; the `***`
    placeholder shipped in example env files is rejected.
    """
    if network not in NETWORKS:
        raise ConfigError(f"Unknown network: {network} (expected one of {', '.join(NETWORKS)})", field="network")
    load_dotenv(env_file or get_env_path(), override=False)

    if network == "testnet":
        if (
            os.environ.get("OPERATOR_ACCOUNT_ID") == PLACEHOLDER_SECRET
            or os.environ.get("OPERATOR_ACCOUNT_PRIVATE_KEY") == PLACEHOLDER_SECRET
        ):
            raise ConfigError(
                "OPERATOR_ACCOUNT_ID and OPERATOR_ACCOUNT_PRIVATE_KEY must be set for testnet!",
                field="operatorAccountId",
            )
        return {
            "nodeType": "testnet",
            "nodeTimeout": os.environ.get("NODE_TIMEOUT"),
            "mirrorNodeRestUrl": os.environ.get("MIRROR_NODE_REST_URL"),
            "mirrorNodeRestJavaUrl": os.environ.get("MIRROR_NODE_REST_JAVA_URL"),
            "operatorAccountId": os.environ.get("OPERATOR_ACCOUNT_ID"),
            "operatorAccountPrivateKey": os.environ.get("OPERATOR_ACCOUNT_PRIVATE_KEY"),
            "jsonRpcServerUrl": os.environ.get("JSON_RPC_SERVER_URL"),
        }

    return {
        "nodeType": "local",
        "nodeTimeout": os.environ.get("NODE_TIMEOUT"),
        "nodeIp": os.environ.get("NODE_IP"),
        "nodeAccountId": os.environ.get("NODE_ACCOUNT_ID"),
        "mirrorNetwork": os.environ.get("MIRROR_NETWORK"),
        "mirrorNodeRestUrl": os.environ.get("MIRROR_NODE_REST_URL"),
        "mirrorNodeRestJavaUrl": os.environ.get("MIRROR_NODE_REST_JAVA_URL"),
        "operatorAccountId": os.environ.get("OPERATOR_ACCOUNT_ID"),
        "operatorAccountPrivateKey": os.environ.get("OPERATOR_ACCOUNT_PRIVATE_KEY"),
        "jsonRpcServerUrl": os.environ.get("JSON_RPC_SERVER_URL"),
    }


def set_network_environment(network: str, env_file: Path | None = None) -> dict[str, str]:
    """Write the network config back into ``os.environ``; return what was set."""
    config = get_network_config(network, env_file)
    applied: dict[str, str] = {}
    for key, value in config.items():
        if value:
            env_key = to_env_format(key)
            os.environ[env_key] = str(value)
            applied[env_key] = str(value)
    return applied
