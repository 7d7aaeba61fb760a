"""
Data shapes exchanged with the Meta Pool contract.

Response records mirror the JSON structs returned by the contract's view
methods. U128/U64 amounts arrive as decimal strings and are decoded into
Python ints; ``to_dict()`` re-encodes them as decimal strings.

Argument records carry the inputs of each contract method. They are
validated on construction and serialized with ``to_json()``.

Contract source: https://github.com/Narwallets/meta-pool/blob/master/metapool/src/lib.rs
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, TypeVar

U128_MAX = 2**128 - 1
U64_MAX = 2**64 - 1

# Field metadata: how a field is encoded on the wire
U128: dict[str, Any] = {"wire": "u128"}
U64: dict[str, Any] = {"wire": "u64"}


def _wire_name(key: str) -> dict[str, Any]:
    return {"key": key}


R = TypeVar("R", bound="_Record")


class _Record:
    """Mixin giving a dataclass JSON decoding/encoding driven by field metadata."""

    @classmethod
    def from_dict(cls: type[R], payload: dict[str, Any]) -> R:
        values: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            raw = payload[f.metadata.get("key", f.name)]
            if f.metadata.get("wire") in ("u128", "u64"):
                raw = int(raw)
            elif isinstance(raw, list):
                raw = tuple(raw)
            values[f.name] = raw
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if f.metadata.get("wire") in ("u128", "u64"):
                value = str(value)
            elif isinstance(value, tuple):
                value = list(value)
            out[f.metadata.get("key", f.name)] = value
        return out


# ---------------------------------------------------------------------------
# Response records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AccountInfo(_Record):
    """Struct returned from get_account_info."""

    account_id: str
    # available balance that can be withdrawn
    available: int = field(metadata=U128)
    # stNEAR owned (computed from the shares owned)
    stnear: int = field(metadata=U128)
    # $META owned, including pending rewards
    meta: int = field(metadata=U128)
    # $META realized & secured
    realized_meta: int = field(metadata=U128)
    unstaked: int = field(metadata=U128)
    # funds unlock at unstaked_requested_epoch_height + NUM_EPOCHS_TO_UNLOCK
    unstaked_requested_epoch_height: int = field(metadata=U64)
    can_withdraw: bool
    # available + staked + current rewards + unstaked
    total: int = field(metadata=U128)

    # "trip meter" statistics, resettable by the user
    trip_start: int = field(metadata=U64)  # nanoseconds
    trip_start_stnear: int = field(metadata=U128)
    trip_accum_stakes: int = field(metadata=U128)
    trip_accum_unstakes: int = field(metadata=U128)
    # current_stnear + trip_accum_unstakes - trip_accum_stakes - trip_start_stnear
    trip_rewards: int = field(metadata=U128)

    # liquidity pool shares, if the user is a liquidity provider
    nslp_shares: int = field(metadata=U128)
    nslp_share_value: int = field(metadata=U128)
    nslp_share_bp: int

    stake_shares: int = field(metadata=U128)


@dataclass(frozen=True)
class ContractState(_Record):
    """Struct returned from get_contract_state."""

    env_epoch_height: int = field(metadata=U64)
    contract_account_balance: int = field(metadata=U128)

    # deposits minus for_staking, plus completed unstakes minus withdrawals
    total_available: int = field(metadata=U128)
    # selected for staking by the users, not necessarily staked yet
    total_for_staking: int = field(metadata=U128)
    # sent to the pools and staked, NOT including rewards
    total_actually_staked: int = field(metadata=U128)

    epoch_stake_orders: int = field(metadata=U128)
    epoch_unstake_orders: int = field(metadata=U128)

    # sum(accounts.unstaked); == reserve_for_unstake_claims + total_unstaked_and_waiting
    total_unstake_claims: int = field(metadata=U128)
    # share_price = total_for_staking / total_stake_shares
    total_stake_shares: int = field(metadata=U128)
    total_unstaked_and_waiting: int = field(metadata=U128)
    # reserved to fulfill unstake claims only
    reserve_for_unstake_claims: int = field(metadata=U128)

    total_meta: int = field(metadata=U128)
    st_near_price: int = field(metadata=U128)
    # stats only, can only grow
    accumulated_staked_rewards: int = field(metadata=U128)

    nslp_liquidity: int = field(metadata=U128)
    nslp_stnear_balance: int = field(metadata=U128)
    nslp_target: int = field(metadata=U128)
    nslp_share_price: int = field(metadata=U128)
    nslp_total_shares: int = field(metadata=U128)
    # current discount for immediate unstake (sell stNEAR)
    nslp_current_discount_basis_points: int
    nslp_min_discount_basis_points: int
    nslp_max_discount_basis_points: int

    accounts_count: int = field(metadata=U64)
    staking_pools_count: int

    min_deposit_amount: int = field(metadata=U128)

    est_meta_rewards_stakers: int = field(metadata=U128)
    est_meta_rewards_lu: int = field(metadata=U128)
    est_meta_rewards_lp: int = field(metadata=U128)

    max_meta_rewards_stakers: int = field(metadata=U128)
    max_meta_rewards_lu: int = field(metadata=U128)
    max_meta_rewards_lp: int = field(metadata=U128)


@dataclass(frozen=True)
class ContractParams(_Record):
    """Struct returned from get_contract_params."""

    nslp_liquidity_target: int = field(metadata=U128)
    nslp_max_discount_basis_points: int
    nslp_min_discount_basis_points: int
    staker_meta_mult_pct: int
    stnear_sell_meta_mult_pct: int
    lp_provider_meta_mult_pct: int
    operator_rewards_fee_basis_points: int
    operator_swap_cut_basis_points: int
    treasury_swap_cut_basis_points: int
    min_deposit_amount: int = field(metadata=U128)


@dataclass(frozen=True)
class ContractInfo(_Record):
    """NEP-129 contract metadata returned from get_contract_info."""

    data_version: int = field(metadata=_wire_name("dataVersion"))
    name: str
    version: str
    developers_account_id: str = field(metadata=_wire_name("developersAccountId"))
    source: str
    standards: tuple[str, ...]
    web_app_url: str = field(metadata=_wire_name("webAppUrl"))
    auditor_account_id: str = field(metadata=_wire_name("auditorAccountId"))


@dataclass(frozen=True)
class StakingPoolInfo(_Record):
    """Entry returned from get_staking_pool_list."""

    inx: int
    account_id: str
    weight_basis_points: int
    staked: int = field(metadata=U128)
    unstaked: int = field(metadata=U128)
    unstaked_requested_epoch_height: int = field(metadata=U64)
    # epoch when the pool was last asked for staking rewards
    last_asked_rewards_epoch_height: int = field(metadata=U64)


@dataclass(frozen=True)
class RemoveLiquidityResult(_Record):
    near: int = field(metadata=U128)
    st_near: int = field(metadata=U128)


@dataclass(frozen=True)
class LiquidUnstakeResult(_Record):
    near: int = field(metadata=U128)
    fee: int = field(metadata=U128)
    meta: int = field(metadata=U128)


# ---------------------------------------------------------------------------
# Argument records
# ---------------------------------------------------------------------------


class ArgumentError(ValueError):
    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def _check_uint(errors: list[str], name: str, value: Any, maximum: int) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(f"{name}: expected int, got {type(value).__name__}")
    elif value < 0:
        errors.append(f"{name}: must be non-negative, got {value}")
    elif value > maximum:
        errors.append(f"{name}: exceeds {maximum.bit_length()}-bit range")


def _check_account_id(errors: list[str], name: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        errors.append(f"{name}: expected non-empty account id")


def _raise_if(errors: list[str], record: object) -> None:
    if errors:
        raise ArgumentError(
            f"Invalid arguments for {type(record).__name__}.",
            errors=errors,
        )


@dataclass(frozen=True)
class AccountIdArgs:
    account_id: str

    def __post_init__(self) -> None:
        errors: list[str] = []
        _check_account_id(errors, "account_id", self.account_id)
        _raise_if(errors, self)

    def to_json(self) -> dict[str, Any]:
        return {"account_id": self.account_id}


@dataclass(frozen=True)
class AmountArgs:
    """Single yocto amount, used by withdraw, unstake and nslp_remove_liquidity."""

    amount: int

    def __post_init__(self) -> None:
        errors: list[str] = []
        _check_uint(errors, "amount", self.amount, U128_MAX)
        _raise_if(errors, self)

    def to_json(self) -> dict[str, Any]:
        return {"amount": str(self.amount)}


@dataclass(frozen=True)
class DepositArgs:
    """yoctoNEAR attached to a payable call; not part of the JSON args."""

    attached_yoctos: int

    def __post_init__(self) -> None:
        errors: list[str] = []
        _check_uint(errors, "attached_yoctos", self.attached_yoctos, U128_MAX)
        _raise_if(errors, self)


@dataclass(frozen=True)
class LiquidUnstakeArgs:
    st_near_to_burn: int
    # lets the user put a limit on the fee paid
    min_expected_near: int

    def __post_init__(self) -> None:
        errors: list[str] = []
        _check_uint(errors, "st_near_to_burn", self.st_near_to_burn, U128_MAX)
        _check_uint(errors, "min_expected_near", self.min_expected_near, U128_MAX)
        _raise_if(errors, self)

    def to_json(self) -> dict[str, Any]:
        return {
            "st_near_to_burn": str(self.st_near_to_burn),
            "min_expected_near": str(self.min_expected_near),
        }


@dataclass(frozen=True)
class SellStNearArgs:
    stnear_to_sell: int

    def __post_init__(self) -> None:
        errors: list[str] = []
        _check_uint(errors, "stnear_to_sell", self.stnear_to_sell, U128_MAX)
        _raise_if(errors, self)

    def to_json(self) -> dict[str, Any]:
        return {"stnear_to_sell": str(self.stnear_to_sell)}


@dataclass(frozen=True)
class PaginationArgs:
    from_index: int
    limit: int

    def __post_init__(self) -> None:
        errors: list[str] = []
        _check_uint(errors, "from_index", self.from_index, U64_MAX)
        _check_uint(errors, "limit", self.limit, U64_MAX)
        _raise_if(errors, self)

    def to_json(self) -> dict[str, Any]:
        return {"from_index": self.from_index, "limit": self.limit}


__all__ = [
    "AccountIdArgs",
    "AccountInfo",
    "AmountArgs",
    "ArgumentError",
    "ContractInfo",
    "ContractParams",
    "ContractState",
    "DepositArgs",
    "LiquidUnstakeArgs",
    "LiquidUnstakeResult",
    "PaginationArgs",
    "RemoveLiquidityResult",
    "SellStNearArgs",
    "StakingPoolInfo",
    "U128_MAX",
    "U64_MAX",
]
