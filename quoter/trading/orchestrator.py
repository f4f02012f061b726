"""Trade orchestrator: owns the trade form and drives one trade at a time.

State machine per trade attempt:

    IDLE -> QUOTING -> BOUNDING -> AWAITING_EXECUTION -> SETTLED | FAILED

Every input change (amount text, mode, slippage, reserves, balance)
recomputes the quote synchronously. ``confirm()`` freezes the current quote
and bound into an ExecutionRequest and awaits the executor; while that
request is in flight, input changes are stored but nothing is recomputed
or resubmitted.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum

import structlog

from quoter.amm.constant_product import Reserves
from quoter.quoting.bounds import Bound, compute_bound
from quoter.quoting.engine import quote
from quoter.quoting.result import QuoteError, QuoteResult
from quoter.quoting.slippage import parse_slippage_bps
from quoter.quoting.types import TradeMode
from quoter.quoting.units import parse_amount
from quoter.trading.collaborators import (
    ExecutionRequest,
    ExecutionResult,
    Executor,
    NullListener,
    TradeListener,
)
from quoter.trading.config import DEFAULT_TRADING_CONFIG, TradingConfig
from quoter.trading.errors import (
    DEFAULT_FAILURE_MESSAGE,
    ExecutionError,
    TradeFailure,
    classify_execution_error,
)

logger = structlog.get_logger()


def check_balance(result: QuoteResult, balance: int | None) -> QuoteResult:
    """Fail a sell quote whose DEMO input exceeds the caller's balance.

    Buy quotes, non-quotes and unknown balances pass through unchanged.
    """
    if not result.is_valid or balance is None:
        return result
    assert result.quote is not None
    if result.quote.mode.is_buy:
        return result
    required = result.quote.amount_in
    if required > balance:
        return QuoteResult.with_error(
            QuoteError.INSUFFICIENT_BALANCE,
            f"requires {required}, balance {balance}",
        )
    return result


class TradeState(str, Enum):
    """Where the current trade attempt is."""

    IDLE = "idle"
    QUOTING = "quoting"
    BOUNDING = "bounding"
    AWAITING_EXECUTION = "awaiting_execution"
    SETTLED = "settled"
    FAILED = "failed"


@dataclass(frozen=True)
class TradeOutcome:
    """Result of a confirm() call."""

    settled: bool
    failure: TradeFailure | None = None
    reason: str | None = None

    @classmethod
    def success(cls) -> "TradeOutcome":
        return cls(settled=True)

    @classmethod
    def failed(cls, failure: TradeFailure, reason: str | None = None) -> "TradeOutcome":
        return cls(settled=False, failure=failure, reason=reason)


class TradeOrchestrator:
    """Sequences quoting, bounding and execution for the ETH/DEMO pool.

    Args:
        executor: Collaborator that signs and submits trades
        listener: Receives quote/settled/failed events
        config: Trading settings
        mode: Initial trade mode
        reserves: Initial reserve snapshot (empty pool if None)
    """

    def __init__(
        self,
        executor: Executor,
        listener: TradeListener | None = None,
        config: TradingConfig = DEFAULT_TRADING_CONFIG,
        mode: TradeMode = TradeMode.SPEND_EXACT_IN,
        reserves: Reserves | None = None,
    ) -> None:
        self.executor = executor
        self.listener = listener or NullListener()
        self.config = config

        # Form state
        self.mode = mode
        self.input_text = ""
        self.slippage_text = config.default_slippage
        self.slippage_bps = parse_slippage_bps(self.slippage_text)
        self.reserves = reserves or Reserves(0, 0)
        self.balance: int | None = None

        # Derived state
        self.state = TradeState.IDLE
        self.result = QuoteResult.empty()
        self.bound: Bound | None = None
        self.pending: ExecutionRequest | None = None
        self.last_failure: TradeFailure | None = None
        self.last_failure_reason: str | None = None
        self._dirty_during_execution = False

    # --- Form inputs ---

    def edit_amount(self, text: str) -> None:
        """Set the amount field (a decimal string in whole tokens)."""
        self.input_text = text
        self._refresh()

    def set_mode(self, mode: TradeMode) -> None:
        self.mode = mode
        self._refresh()

    def set_slippage(self, text: str) -> None:
        """Set the slippage tolerance field (percent, up to two decimals)."""
        self.slippage_text = text
        self.slippage_bps = parse_slippage_bps(text)
        self._refresh()

    def update_reserves(self, reserves: Reserves) -> None:
        self.update_market(reserves)

    def update_balance(self, balance: int) -> None:
        self.balance = balance
        self._refresh()

    def update_market(self, reserves: Reserves, balance: int | None = None) -> None:
        """Apply a reserve snapshot (and optionally a balance) in one recompute."""
        self.reserves = reserves
        if balance is not None:
            self.balance = balance
        self._refresh()

    # --- Derived views ---

    @property
    def is_awaiting_execution(self) -> bool:
        return self.state is TradeState.AWAITING_EXECUTION

    @property
    def blocking_reason(self) -> QuoteError | TradeFailure | None:
        """What currently prevents confirmation, if anything shown to the user."""
        if self.is_awaiting_execution:
            return TradeFailure.TRADE_IN_FLIGHT
        if self.result.error is not None and self.result.error.is_blocking:
            return self.result.error
        if self.result.is_valid and self.slippage_bps is None:
            return TradeFailure.INVALID_SLIPPAGE
        return None

    @property
    def can_confirm(self) -> bool:
        if self.state is TradeState.BOUNDING:
            return self.bound is not None
        # Retry after an execution failure; confirm() requotes first
        return (
            self.state is TradeState.FAILED
            and self.result.is_valid
            and self.slippage_bps is not None
        )

    # --- Quoting ---

    def _refresh(self) -> None:
        if self.is_awaiting_execution:
            self._dirty_during_execution = True
            logger.debug("recompute_deferred", state=self.state.value, mode=self.mode.value)
            return
        self._recompute()

    def _recompute(self) -> None:
        self.bound = None

        text = self.input_text.strip()
        if not text:
            self._set_result(TradeState.IDLE, QuoteResult.empty())
            return

        amount = parse_amount(text)
        if amount is None:
            self._set_result(
                TradeState.IDLE,
                QuoteResult.with_error(QuoteError.INVALID_AMOUNT, f"unparseable amount {text!r}"),
            )
            return

        self.state = TradeState.QUOTING
        result = quote(self.reserves, self.mode, amount)
        if self.config.check_balance:
            result = check_balance(result, self.balance)

        if result.is_empty:
            self._set_result(TradeState.IDLE, result)
            return
        if result.is_error:
            self._set_result(TradeState.FAILED, result)
            return

        if self.slippage_bps is not None:
            assert result.quote is not None
            self.bound = compute_bound(result.quote, self.slippage_bps, self.config.min_output)
        self._set_result(TradeState.BOUNDING, result)

    def _set_result(self, state: TradeState, result: QuoteResult) -> None:
        self.state = state
        self.result = result
        self.listener.on_quote_changed(result)

    # --- Execution ---

    async def confirm(self) -> TradeOutcome:
        """Submit the current quote with its bound to the executor.

        Never raises for executor failures; they become a FAILED state and a
        failed TradeOutcome.
        """
        if self.is_awaiting_execution:
            logger.warning(
                "trade_already_in_flight",
                mode=self.mode.value,
                pending_amount=self.pending.exact_amount if self.pending else None,
            )
            return TradeOutcome.failed(TradeFailure.TRADE_IN_FLIGHT)

        if self.state is TradeState.FAILED and self.result.is_valid:
            # Retry after an execution failure with a fresh quote
            self._recompute()

        if self.state is not TradeState.BOUNDING or self.result.quote is None:
            return TradeOutcome.failed(TradeFailure.NOT_READY, self._not_ready_reason())
        if self.bound is None:
            return TradeOutcome.failed(TradeFailure.INVALID_SLIPPAGE, self.slippage_text)

        request = ExecutionRequest(
            mode=self.result.quote.mode,
            exact_amount=self.result.quote.exact_amount,
            bound=self.bound,
        )
        self.pending = request
        self.state = TradeState.AWAITING_EXECUTION
        self._dirty_during_execution = False

        logger.info(
            "trade_submitted",
            mode=request.mode.value,
            exact_amount=request.exact_amount,
            bound_kind=request.bound.kind.value,
            bound=request.bound.amount,
        )

        try:
            result = await self.executor.execute(request)
        except asyncio.CancelledError:
            self._fail(request, TradeFailure.EXECUTION_REVERTED, "execution cancelled")
            raise
        except ExecutionError as err:
            result = ExecutionResult(success=False, failure=err.failure, reason=str(err) or None)
        except Exception as err:
            logger.exception(
                "executor_error",
                mode=request.mode.value,
                exact_amount=request.exact_amount,
            )
            result = ExecutionResult(
                success=False,
                failure=classify_execution_error(err),
                reason=str(err) or None,
            )

        if result.success:
            self._settle(request)
            return TradeOutcome.success()

        failure = result.failure or TradeFailure.EXECUTION_REVERTED
        self._fail(request, failure, result.reason)
        return TradeOutcome.failed(failure, result.reason)

    def _settle(self, request: ExecutionRequest) -> None:
        self.pending = None
        self.last_failure = None
        self.last_failure_reason = None
        self.input_text = ""
        self.bound = None
        self.state = TradeState.SETTLED
        self.result = QuoteResult.empty()

        logger.info(
            "trade_settled",
            mode=request.mode.value,
            exact_amount=request.exact_amount,
        )
        self.listener.on_trade_settled()
        self.listener.on_quote_changed(self.result)

    def _fail(self, request: ExecutionRequest, failure: TradeFailure, reason: str | None) -> None:
        self.pending = None
        self.last_failure = failure
        self.last_failure_reason = reason
        self.state = TradeState.FAILED

        logger.warning(
            "trade_failed",
            mode=request.mode.value,
            exact_amount=request.exact_amount,
            failure=failure.value,
            reason=reason,
        )
        self.listener.on_trade_failed(reason or DEFAULT_FAILURE_MESSAGE)

        if self._dirty_during_execution:
            self._dirty_during_execution = False
            self._recompute()

    # --- Cancellation ---

    def cancel(self) -> bool:
        """Abandon the current attempt and clear the form.

        Returns:
            False if a trade is in flight (it cannot be withdrawn), else True
        """
        if self.is_awaiting_execution:
            logger.warning("cancel_while_awaiting_execution", mode=self.mode.value)
            return False

        self.input_text = ""
        self.bound = None
        self.last_failure = None
        self.last_failure_reason = None
        self._set_result(TradeState.IDLE, QuoteResult.empty())
        return True

    def _not_ready_reason(self) -> str:
        if self.result.error is not None:
            return self.result.error.value
        return "no quote"
