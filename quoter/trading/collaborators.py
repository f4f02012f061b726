"""Interfaces of the external collaborators the trade orchestrator drives.

Reading reserves and balances, and signing and submitting transactions,
are done elsewhere (wallet, chain client). The orchestrator only needs
these narrow async interfaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from quoter.amm.constant_product import Reserves
from quoter.quoting.bounds import Bound
from quoter.quoting.result import QuoteResult
from quoter.quoting.types import TradeMode
from quoter.trading.errors import TradeFailure


@dataclass(frozen=True)
class ExecutionRequest:
    """A trade handed to the executor. Frozen once submitted.

    Attributes:
        mode: Trade mode
        exact_amount: The amount the trader fixed
        bound: min_out for exact-input modes, max_in for exact-output modes
    """

    mode: TradeMode
    exact_amount: int
    bound: Bound


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome reported by an executor."""

    success: bool
    failure: TradeFailure | None = None
    reason: str | None = None

    @classmethod
    def confirmed(cls) -> "ExecutionResult":
        return cls(success=True)

    @classmethod
    def rejected(cls, reason: str) -> "ExecutionResult":
        return cls(success=False, failure=TradeFailure.EXECUTION_REJECTED, reason=reason)

    @classmethod
    def reverted(cls, reason: str) -> "ExecutionResult":
        return cls(success=False, failure=TradeFailure.EXECUTION_REVERTED, reason=reason)


@runtime_checkable
class ReserveReader(Protocol):
    """Supplies pool reserves from a single snapshot."""

    async def read_reserves(self) -> Reserves: ...


@runtime_checkable
class BalanceReader(Protocol):
    """Supplies the caller's DEMO balance."""

    async def read_balance(self) -> int: ...


@runtime_checkable
class Executor(Protocol):
    """Signs, submits and waits for a trade.

    May return a failed ExecutionResult or raise; the orchestrator handles
    both.
    """

    async def execute(self, request: ExecutionRequest) -> ExecutionResult: ...


class TradeListener(Protocol):
    """Receives orchestrator events."""

    def on_quote_changed(self, result: QuoteResult) -> None: ...

    def on_trade_settled(self) -> None: ...

    def on_trade_failed(self, reason: str) -> None: ...


class NullListener:
    """Listener that ignores every event."""

    def on_quote_changed(self, result: QuoteResult) -> None:
        pass

    def on_trade_settled(self) -> None:
        pass

    def on_trade_failed(self, reason: str) -> None:
        pass
