"""Tests for the TransactionOutcome envelope."""

from __future__ import annotations

from metapool.outcome import TransactionOutcome, last_result


class TestTransactionOutcome:
    def test_success_with_json_value(self, make_outcome) -> None:
        raw = make_outcome({"near": "997", "fee": "3", "meta": "0"}, logs=["burned 1000"])
        outcome = TransactionOutcome.from_raw(raw)
        assert outcome.succeeded is True
        assert outcome.json() == {"near": "997", "fee": "3", "meta": "0"}
        assert outcome.logs == ("burned 1000",)
        assert outcome.transaction_hash == "9Xq1"
        assert outcome.failure is None
        assert outcome.raw is raw

    def test_empty_success_value(self, make_outcome) -> None:
        outcome = TransactionOutcome.from_raw(make_outcome(""))
        assert outcome.succeeded is True
        assert outcome.return_value == b""
        assert outcome.json() == ""

    def test_non_json_value_returned_as_text(self, make_outcome) -> None:
        outcome = TransactionOutcome.from_raw(make_outcome("not json"))
        assert outcome.json() == "not json"

    def test_failure(self, make_outcome) -> None:
        failure = {"ActionError": {"index": 0, "kind": {"FunctionCallError": {}}}}
        outcome = TransactionOutcome.from_raw(make_outcome(failure=failure))
        assert outcome.succeeded is False
        assert outcome.failure == failure
        assert outcome.return_value is None
        assert outcome.json() is None

    def test_logs_from_transaction_and_receipts(self) -> None:
        raw = {
            "status": {"SuccessValue": ""},
            "transaction_outcome": {"id": "h", "outcome": {"logs": ["tx log"]}},
            "receipts_outcome": [
                {"id": "a", "outcome": {"logs": ["first"]}},
                {"id": "b", "outcome": {"logs": ["second", "third"]}},
            ],
        }
        outcome = TransactionOutcome.from_raw(raw)
        assert outcome.logs == ("tx log", "first", "second", "third")

    def test_pending_status_is_not_success(self) -> None:
        outcome = TransactionOutcome.from_raw({"status": "Started"})
        assert outcome.succeeded is False
        assert outcome.logs == ()
        assert outcome.transaction_hash is None

    def test_last_result(self, make_outcome) -> None:
        assert last_result(make_outcome(42)) == 42

    def test_non_dict_result_kept_opaque(self) -> None:
        result = object()
        outcome = TransactionOutcome.from_raw(result)
        assert outcome.succeeded is True
        assert outcome.raw is result
        assert outcome.return_value is None
        assert outcome.logs == ()
        assert outcome.transaction_hash is None
        assert outcome.json() is None
