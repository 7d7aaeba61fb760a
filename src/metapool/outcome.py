"""
Transaction outcome envelope.

Wraps the FinalExecutionOutcome JSON returned by NEAR's
broadcast_tx_commit / tx RPC methods into a small, portable record:
success flag, raw return value, and execution logs.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class TransactionOutcome:
    succeeded: bool
    return_value: Optional[bytes] = None
    logs: tuple[str, ...] = ()
    failure: Optional[dict[str, Any]] = None
    transaction_hash: Optional[str] = None
    raw: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def from_raw(cls, raw: Any) -> "TransactionOutcome":
        """
        Build an envelope from a FinalExecutionOutcome dict.

        Any other value (e.g. a result object from another NEAR SDK) is
        kept opaque: the call returned without raising, so it counts as
        succeeded and only ``raw`` is filled in.

        Args:
            raw: Outcome as returned by the account collaborator

        Returns:
            TransactionOutcome keeping the original value in ``raw``
        """
        if not isinstance(raw, dict):
            return cls(succeeded=True, raw=raw)

        status = raw.get("status")
        return_value = None
        failure = None

        if isinstance(status, dict) and "SuccessValue" in status:
            return_value = base64.b64decode(status["SuccessValue"] or "")
        elif isinstance(status, dict) and "Failure" in status:
            failure = status["Failure"]

        tx_outcome = raw.get("transaction_outcome") or {}
        transaction_hash = tx_outcome.get("id") or (raw.get("transaction") or {}).get("hash")

        return cls(
            succeeded=failure is None and _is_success(status),
            return_value=return_value,
            logs=tuple(_collect_logs(raw)),
            failure=failure,
            transaction_hash=transaction_hash,
            raw=raw,
        )

    def json(self) -> Any:
        """Decode the return value as JSON, falling back to text."""
        if self.return_value is None:
            return None
        text = self.return_value.decode("utf-8")
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text


def _is_success(status: Any) -> bool:
    return isinstance(status, dict) and (
        "SuccessValue" in status or "SuccessReceiptId" in status
    )


def _collect_logs(raw: dict[str, Any]) -> list[str]:
    logs: list[str] = []
    tx_outcome = raw.get("transaction_outcome") or {}
    logs.extend(tx_outcome.get("outcome", {}).get("logs", []))
    for receipt in raw.get("receipts_outcome") or []:
        logs.extend(receipt.get("outcome", {}).get("logs", []))
    return logs


def last_result(raw: dict[str, Any]) -> Any:
    """Return the decoded SuccessValue of a raw outcome, or None."""
    return TransactionOutcome.from_raw(raw).json()
