"""Shared canned contract payloads."""

from __future__ import annotations

import base64
import json
from typing import Any

import pytest

ONE_NEAR = 10**24


def outcome_payload(
    return_value: Any = "",
    logs: list[str] | None = None,
    failure: dict[str, Any] | None = None,
    tx_hash: str = "9Xq1",
) -> dict[str, Any]:
    """Build a FinalExecutionOutcome dict like broadcast_tx_commit returns."""
    if failure is not None:
        status: dict[str, Any] = {"Failure": failure}
    else:
        text = return_value if isinstance(return_value, str) else json.dumps(return_value)
        status = {"SuccessValue": base64.b64encode(text.encode("utf-8")).decode("ascii")}
    return {
        "status": status,
        "transaction": {"hash": tx_hash, "signer_id": "alice.testnet"},
        "transaction_outcome": {
            "id": tx_hash,
            "outcome": {"logs": [], "status": {"SuccessReceiptId": "r1"}},
        },
        "receipts_outcome": [
            {"id": "r1", "outcome": {"logs": logs or [], "status": status}},
        ],
    }


@pytest.fixture()
def make_outcome():
    return outcome_payload


@pytest.fixture()
def contract_state_payload() -> dict[str, Any]:
    return {
        "env_epoch_height": "1520",
        "contract_account_balance": str(12_000 * ONE_NEAR),
        "total_available": str(350 * ONE_NEAR),
        "total_for_staking": str(10_500 * ONE_NEAR),
        "total_actually_staked": str(10_400 * ONE_NEAR),
        "epoch_stake_orders": "0",
        "epoch_unstake_orders": "0",
        "total_unstake_claims": str(20 * ONE_NEAR),
        "total_stake_shares": str(10_000 * ONE_NEAR),
        "total_unstaked_and_waiting": str(15 * ONE_NEAR),
        "reserve_for_unstake_claims": str(5 * ONE_NEAR),
        "total_meta": "123456789",
        "st_near_price": "1050000000000000000000000",
        "accumulated_staked_rewards": str(500 * ONE_NEAR),
        "nslp_liquidity": str(900 * ONE_NEAR),
        "nslp_stnear_balance": str(50 * ONE_NEAR),
        "nslp_target": str(1_000 * ONE_NEAR),
        "nslp_share_price": str(ONE_NEAR),
        "nslp_total_shares": str(950 * ONE_NEAR),
        "nslp_current_discount_basis_points": 30,
        "nslp_min_discount_basis_points": 30,
        "nslp_max_discount_basis_points": 180,
        "accounts_count": "4211",
        "staking_pools_count": 8,
        "min_deposit_amount": str(ONE_NEAR),
        "est_meta_rewards_stakers": "0",
        "est_meta_rewards_lu": "0",
        "est_meta_rewards_lp": "0",
        "max_meta_rewards_stakers": "1000",
        "max_meta_rewards_lu": "500",
        "max_meta_rewards_lp": "250",
    }


@pytest.fixture()
def account_info_payload() -> dict[str, Any]:
    return {
        "account_id": "alice.testnet",
        "available": "0",
        "stnear": str(3 * ONE_NEAR),
        "meta": "1500",
        "realized_meta": "1000",
        "unstaked": str(ONE_NEAR),
        "unstaked_requested_epoch_height": "1518",
        "can_withdraw": False,
        "total": str(4 * ONE_NEAR),
        "trip_start": "1650000000000000000",
        "trip_start_stnear": str(2 * ONE_NEAR),
        "trip_accum_stakes": str(ONE_NEAR),
        "trip_accum_unstakes": "0",
        "trip_rewards": "50000000000000000000000",
        "nslp_shares": "0",
        "nslp_share_value": "0",
        "nslp_share_bp": 0,
        "stake_shares": "2857142857142857142857142",
    }


@pytest.fixture()
def contract_params_payload() -> dict[str, Any]:
    return {
        "nslp_liquidity_target": str(1_000 * ONE_NEAR),
        "nslp_max_discount_basis_points": 180,
        "nslp_min_discount_basis_points": 30,
        "staker_meta_mult_pct": 5000,
        "stnear_sell_meta_mult_pct": 500,
        "lp_provider_meta_mult_pct": 200,
        "operator_rewards_fee_basis_points": 50,
        "operator_swap_cut_basis_points": 2500,
        "treasury_swap_cut_basis_points": 2500,
        "min_deposit_amount": str(ONE_NEAR),
    }


@pytest.fixture()
def contract_info_payload() -> dict[str, Any]:
    return {
        "dataVersion": 1,
        "name": "Metapool",
        "version": "1.2.0",
        "developersAccountId": "narwallets.near",
        "source": "https://github.com/Narwallets/meta-pool",
        "standards": ["NEP-141", "NEP-145", "SP"],
        "webAppUrl": "https://metapool.app",
        "auditorAccountId": "",
    }
