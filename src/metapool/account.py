"""
Account collaborators.

``Account`` is the seam the Metapool proxy talks to: anything exposing
``function_call`` and ``view_function`` will do (an RpcAccount, a wrapper
around another NEAR SDK, or a fake in tests).

``RpcAccount`` implements it on top of JsonRpcProvider. Key handling and
transaction signing stay outside this package, behind TransactionSigner.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from .outcome import TransactionOutcome
from .rpc import JsonRpcProvider

# Storage staking cost, yoctoNEAR per byte (protocol config)
STORAGE_AMOUNT_PER_BYTE = 10**19


class SignerRequiredError(RuntimeError):
    """Raised when a state-changing call is made on a read-only account."""


class TransactionFailedError(RuntimeError):
    """Raised when a broadcast transaction executed with a Failure status."""

    def __init__(self, message: str, outcome: TransactionOutcome) -> None:
        super().__init__(message)
        self.outcome = outcome


@runtime_checkable
class Account(Protocol):
    """Signing account able to submit calls and read-only queries."""

    async def function_call(
        self,
        *,
        contract_id: str,
        method_name: str,
        args: dict[str, Any],
        gas: int,
        attached_deposit: int,
    ) -> Any:
        ...

    async def view_function(
        self,
        contract_id: str,
        method_name: str,
        args: dict[str, Any],
    ) -> Any:
        ...


@runtime_checkable
class TransactionSigner(Protocol):
    """Builds and signs a FunctionCall transaction for an account."""

    async def sign_function_call(
        self,
        *,
        signer_id: str,
        receiver_id: str,
        method_name: str,
        args: bytes,
        gas: int,
        deposit: int,
    ) -> str:
        """Return the signed transaction, borsh-serialized and base64 encoded."""
        ...


@dataclass(frozen=True)
class AccountBalance:
    total: int
    state_staked: int
    staked: int
    available: int


class RpcAccount:
    """
    Account backed by a JSON-RPC provider.

    Args:
        account_id: NEAR account id (e.g. "alice.testnet")
        provider: JsonRpcProvider for the target network
        signer: Signs function calls. Without it the account is read-only.
    """

    def __init__(
        self,
        account_id: str,
        provider: JsonRpcProvider,
        signer: Optional[TransactionSigner] = None,
    ) -> None:
        self.account_id = account_id
        self.provider = provider
        self._signer = signer

    async def function_call(
        self,
        *,
        contract_id: str,
        method_name: str,
        args: dict[str, Any],
        gas: int,
        attached_deposit: int,
    ) -> dict[str, Any]:
        """
        Sign and broadcast a FunctionCall, waiting for execution.

        Returns:
            The FinalExecutionOutcome dict

        Raises:
            SignerRequiredError: If no signer was provided
            TransactionFailedError: If the transaction executed with a Failure
        """
        if self._signer is None:
            raise SignerRequiredError(
                f"Account {self.account_id} has no signer; cannot call {method_name}"
            )

        signed = await self._signer.sign_function_call(
            signer_id=self.account_id,
            receiver_id=contract_id,
            method_name=method_name,
            args=json.dumps(args, separators=(",", ":")).encode("utf-8"),
            gas=gas,
            deposit=attached_deposit,
        )
        raw = await self.provider.broadcast_tx_commit(signed)

        outcome = TransactionOutcome.from_raw(raw)
        if outcome.failure is not None:
            raise TransactionFailedError(
                f"Transaction {outcome.transaction_hash} failed: {outcome.failure}",
                outcome,
            )
        return raw

    async def view_function(
        self,
        contract_id: str,
        method_name: str,
        args: dict[str, Any],
    ) -> Any:
        return await self.provider.call_function(contract_id, method_name, args)

    async def get_account_balance(self) -> AccountBalance:
        """
        Compute the account balance breakdown.

        available = total - max(staked, state_staked), where state_staked is
        the amount locked to pay for storage.
        """
        state = await self.provider.view_account(self.account_id)
        amount = int(state["amount"])
        locked = int(state["locked"])
        state_staked = int(state["storage_usage"]) * STORAGE_AMOUNT_PER_BYTE
        total = amount + locked
        return AccountBalance(
            total=total,
            state_staked=state_staked,
            staked=locked,
            available=total - max(locked, state_staked),
        )
