"""
Proxy for the Meta Pool staking contract.

Every method maps to one contract entry point through one of two
primitives: ``call`` (signed, state-changing) or ``view`` (read-only).
The proxy keeps no state besides the account and the contract id, and
does not catch anything raised by the account.

Contract source: https://github.com/Narwallets/meta-pool/blob/master/metapool/src/lib.rs
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .account import Account
from .config import get_config
from .models import (
    AccountIdArgs,
    AccountInfo,
    AmountArgs,
    ContractInfo,
    ContractParams,
    ContractState,
    DepositArgs,
    LiquidUnstakeArgs,
    PaginationArgs,
    SellStNearArgs,
    StakingPoolInfo,
)
from .outcome import TransactionOutcome
from .units import DEFAULT_TGAS, tgas

logger = logging.getLogger(__name__)

STAKE_TGAS = 50
ADD_LIQUIDITY_TGAS = 75


class Metapool:
    """
    Typed wrapper around the Meta Pool contract.

    Args:
        account: Account used to sign calls and run view queries
        contract_id: Meta Pool contract account id
    """

    def __init__(self, account: Account, contract_id: str) -> None:
        self._account = account
        self._contract_id = contract_id

    @classmethod
    def for_network(cls, account: Account, env: str) -> "Metapool":
        """Bind to the contract of a named network preset (mainnet, testnet, ...)."""
        return cls(account, get_config(env).contract_name)

    @property
    def account(self) -> Account:
        return self._account

    @property
    def contract_id(self) -> str:
        return self._contract_id

    # -----------------------------------------------------------------
    # Primitives
    # -----------------------------------------------------------------

    async def call(
        self,
        method_name: str,
        args: dict[str, Any],
        tgas_amount: int = DEFAULT_TGAS,
        attached_yoctos: int = 0,
    ) -> TransactionOutcome:
        """
        Perform a function call (update state) on the contract.

        Args:
            method_name: Contract method to invoke
            args: JSON args for the function call
            tgas_amount: Tera-gas for the call, 5-300
            attached_yoctos: yoctoNEAR to attach to the call

        Returns:
            TransactionOutcome wrapping the account's raw result
        """
        gas = tgas(tgas_amount)
        logger.debug(
            "call %s.%s gas=%s deposit=%s", self._contract_id, method_name, gas, attached_yoctos
        )
        raw = await self._account.function_call(
            contract_id=self._contract_id,
            method_name=method_name,
            args=args,
            gas=gas,
            attached_deposit=attached_yoctos,
        )
        return TransactionOutcome.from_raw(raw)

    async def view(self, method_name: str, args: Optional[dict[str, Any]] = None) -> Any:
        """
        Perform a view call (read-only) on the contract.

        Args:
            method_name: View method to invoke
            args: JSON args for the view call

        Returns:
            Decoded JSON result, unvalidated
        """
        logger.debug("view %s.%s", self._contract_id, method_name)
        return await self._account.view_function(self._contract_id, method_name, args or {})

    # -----------------------------------------------------------------
    # stNEAR token
    # -----------------------------------------------------------------

    async def ft_balance_of(self, account_id: str) -> int:
        """stNEAR balance of an account, in yocto."""
        result = await self.view("ft_balance_of", AccountIdArgs(account_id).to_json())
        return int(result)

    # -----------------------------------------------------------------
    # Staking
    # -----------------------------------------------------------------

    async def stake(self, attached_yoctos: int) -> TransactionOutcome:
        """
        Deposit and stake NEAR in Meta Pool; stNEAR lands in the caller's wallet.

        Args:
            attached_yoctos: Amount of yoctoNEAR to stake
        """
        deposit = DepositArgs(attached_yoctos)
        return await self.call("deposit_and_stake", {}, STAKE_TGAS, deposit.attached_yoctos)

    async def liquid_unstake(
        self, st_near_to_burn: int, min_expected_near: int
    ) -> TransactionOutcome:
        """
        Liquid-unstake stNEAR; NEAR lands in the caller's wallet immediately.

        The outcome's ``json()`` decodes into a LiquidUnstakeResult payload.

        Args:
            st_near_to_burn: Amount of yocto-stNEAR to sell
            min_expected_near: Minimum yoctoNEAR to receive (caps the fee paid)
        """
        args = LiquidUnstakeArgs(st_near_to_burn, min_expected_near)
        return await self.call("liquid_unstake", args.to_json())

    async def get_near_amount_sell_stnear(self, stnear_to_sell: int) -> int:
        """Simulate a liquid unstake and return the yoctoNEAR it would yield."""
        result = await self.view(
            "get_near_amount_sell_stnear", SellStNearArgs(stnear_to_sell).to_json()
        )
        return int(result)

    async def withdraw(self, amount: int) -> TransactionOutcome:
        return await self.call("withdraw", AmountArgs(amount).to_json())

    async def unstake(self, amount: int) -> TransactionOutcome:
        """Delayed unstake of ``amount`` yocto-stNEAR."""
        return await self.call("unstake", AmountArgs(amount).to_json())

    async def unstake_all(self) -> TransactionOutcome:
        return await self.call("unstake_all", {})

    # -----------------------------------------------------------------
    # Contract queries
    # -----------------------------------------------------------------

    async def get_contract_info(self) -> ContractInfo:
        """NEP-129 contract metadata."""
        return ContractInfo.from_dict(await self.view("get_contract_info"))

    async def get_contract_state(self) -> ContractState:
        return ContractState.from_dict(await self.view("get_contract_state"))

    async def get_contract_params(self) -> ContractParams:
        return ContractParams.from_dict(await self.view("get_contract_params"))

    async def get_number_of_accounts(self) -> int:
        return int(await self.view("get_number_of_accounts", {}))

    async def get_accounts_info(self, from_index: int, limit: int) -> list[AccountInfo]:
        result = await self.view(
            "get_accounts_info", PaginationArgs(from_index, limit).to_json()
        )
        return [AccountInfo.from_dict(item) for item in result]

    async def get_account_info(self, account_id: str) -> AccountInfo:
        result = await self.view("get_account_info", AccountIdArgs(account_id).to_json())
        return AccountInfo.from_dict(result)

    async def get_staking_pool_list(self) -> list[StakingPoolInfo]:
        result = await self.view("get_staking_pool_list", {})
        return [StakingPoolInfo.from_dict(item) for item in result]

    # -----------------------------------------------------------------
    # NEAR/stNEAR liquidity pool
    # -----------------------------------------------------------------

    async def nslp_get_discount_basis_points(self, stnear_to_sell: int) -> int:
        """Current liquid-unstake fee, in basis points, for selling this amount."""
        result = await self.view(
            "nslp_get_discount_basis_points", SellStNearArgs(stnear_to_sell).to_json()
        )
        return int(result)

    async def nslp_add_liquidity(self, attached_yoctos: int) -> TransactionOutcome:
        deposit = DepositArgs(attached_yoctos)
        return await self.call(
            "nslp_add_liquidity", {}, ADD_LIQUIDITY_TGAS, deposit.attached_yoctos
        )

    async def nslp_remove_liquidity(self, amount: int) -> TransactionOutcome:
        """
        Remove liquidity.

        The outcome's ``json()`` decodes into a RemoveLiquidityResult payload.
        """
        return await self.call("nslp_remove_liquidity", AmountArgs(amount).to_json())
