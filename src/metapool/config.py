"""
Network configuration presets.

Every well-known endpoint and contract id lives in this one table.
Callers pick a preset by environment name; unknown names are an error,
never a silent default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Default config directory
METAPOOL_DIR = Path.home() / ".metapool"
METAPOOL_ENV = METAPOOL_DIR / ".env"

DEFAULT_ENV = "testnet"


class ConfigError(ValueError):
    """Raised when an environment name has no configured preset."""


@dataclass(frozen=True)
class NetworkConfig:
    network_id: str
    node_url: str
    contract_name: str
    wallet_url: Optional[str] = None
    helper_url: Optional[str] = None
    explorer_url: Optional[str] = None
    key_path: Optional[Path] = None
    master_account: Optional[str] = None


MAINNET = NetworkConfig(
    network_id="mainnet",
    node_url="https://rpc.mainnet.near.org",
    contract_name="meta-pool.near",
    wallet_url="https://wallet.near.org",
    helper_url="https://helper.mainnet.near.org",
    explorer_url="https://explorer.mainnet.near.org",
)

TESTNET = NetworkConfig(
    network_id="testnet",
    node_url="https://rpc.testnet.near.org",
    contract_name="meta-v2.pool.testnet",
    wallet_url="https://wallet.testnet.near.org",
    helper_url="https://helper.testnet.near.org",
    explorer_url="https://explorer.testnet.near.org",
)

CI = NetworkConfig(
    network_id="shared-test",
    node_url="https://rpc.ci-testnet.near.org",
    contract_name="meta-v2.pool.testnet",
    master_account="test.near",
)


def _local() -> NetworkConfig:
    # Built on demand: the key path depends on the current HOME
    return NetworkConfig(
        network_id="local",
        node_url="http://localhost:3030",
        contract_name="meta-pool.near",
        wallet_url="http://localhost:4000/wallet",
        key_path=Path.home() / ".near" / "validator_key.json",
    )


def get_config(env: str) -> NetworkConfig:
    """
    Look up the network preset for an environment name.

    Args:
        env: One of production/mainnet, development/testnet, local, test/ci

    Returns:
        The matching NetworkConfig

    Raises:
        ConfigError: If no preset exists for env
    """
    if env in ("production", "mainnet"):
        return MAINNET
    if env in ("development", "testnet"):
        return TESTNET
    if env == "local":
        return _local()
    if env in ("test", "ci"):
        return CI
    raise ConfigError(f"Unconfigured environment '{env}'")


def config_from_env(env_path: Optional[Path] = None) -> NetworkConfig:
    """
    Resolve the network config from the process environment.

    Loads ~/.metapool/.env first (if present), then reads:
        NEAR_ENV              preset name (default: testnet)
        NEAR_NODE_URL         overrides the preset's RPC endpoint
        METAPOOL_CONTRACT_ID  overrides the preset's contract id
    """
    env_path = env_path or METAPOOL_ENV

    if env_path.exists():
        load_dotenv(env_path, override=False)

    config = get_config(os.environ.get("NEAR_ENV", DEFAULT_ENV))

    node_url = os.environ.get("NEAR_NODE_URL")
    if node_url:
        config = replace(config, node_url=node_url)

    contract_id = os.environ.get("METAPOOL_CONTRACT_ID")
    if contract_id:
        config = replace(config, contract_name=contract_id)

    return config
