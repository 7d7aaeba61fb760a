__all__ = [
    # Proxy
    "Metapool",
    # Account collaborators
    "Account",
    "AccountBalance",
    "RpcAccount",
    "SignerRequiredError",
    "TransactionFailedError",
    "TransactionSigner",
    # RPC
    "HttpxTransport",
    "JsonRpcProvider",
    "JsonRpcTransport",
    "RpcError",
    # Outcome
    "TransactionOutcome",
    "last_result",
    # Config
    "ConfigError",
    "NetworkConfig",
    "config_from_env",
    "get_config",
    # Models
    "AccountInfo",
    "ArgumentError",
    "ContractInfo",
    "ContractParams",
    "ContractState",
    "LiquidUnstakeResult",
    "RemoveLiquidityResult",
    "StakingPoolInfo",
    # Units
    "ONE_NEAR",
    "ntoy",
    "tgas",
    "yton",
    "yton_full",
]

from .account import (
    Account,
    AccountBalance,
    RpcAccount,
    SignerRequiredError,
    TransactionFailedError,
    TransactionSigner,
)
from .config import ConfigError, NetworkConfig, config_from_env, get_config
from .models import (
    AccountInfo,
    ArgumentError,
    ContractInfo,
    ContractParams,
    ContractState,
    LiquidUnstakeResult,
    RemoveLiquidityResult,
    StakingPoolInfo,
)
from .outcome import TransactionOutcome, last_result
from .proxy import Metapool
from .rpc import HttpxTransport, JsonRpcProvider, JsonRpcTransport, RpcError
from .units import ONE_NEAR, ntoy, tgas, yton, yton_full
