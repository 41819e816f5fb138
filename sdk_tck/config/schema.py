"""Configuration schema using pydantic-settings.

Every field maps one-to-one onto the environment variables the TCK has always
used (JSON_RPC_SERVER_URL, MIRROR_NODE_REST_URL, ...), so an existing `.env`
file works unchanged.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JSON_RPC_SERVER_URL = "http://localhost:8544"


class TckSettings(BaseSettings):
    """Root configuration for a TCK run."""

    # JSON-RPC server under test
    json_rpc_server_url: str = DEFAULT_JSON_RPC_SERVER_URL
    request_timeout: float | None = None  # None: rely on the HTTP client's own behaviour
    internal_error_retries: int = Field(default=3, ge=0)
    internal_error_retry_delay: float = Field(default=1.0, ge=0)

    # Mirror node
    mirror_node_rest_url: str = "http://127.0.0.1:5551"
    mirror_node_rest_java_url: str = "http://127.0.0.1:8084"

    # Consensus node (all three set: custom local network, otherwise testnet)
    node_ip: str | None = None
    node_account_id: str | None = None
    mirror_network: str | None = None

    # Funding / fee-paying identity
    operator_account_id: str = ""
    operator_account_private_key: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    @property
    def has_custom_network(self) -> bool:
        return bool(self.node_ip and self.node_account_id and self.mirror_network)
