"""Trade orchestration over the quoting engine.

Usage:
    from quoter.trading import ReservePoller, TradeOrchestrator

    orchestrator = TradeOrchestrator(executor=my_executor, listener=my_listener)
    poller = ReservePoller(reserve_reader, orchestrator, balance_reader)

    orchestrator.edit_amount("0.01")
    outcome = await orchestrator.confirm()
"""

from quoter.trading.collaborators import (
    BalanceReader,
    ExecutionRequest,
    ExecutionResult,
    Executor,
    NullListener,
    ReserveReader,
    TradeListener,
)
from quoter.trading.config import DEFAULT_TRADING_CONFIG, TradingConfig
from quoter.trading.errors import (
    ExecutionError,
    ExecutionRejected,
    ExecutionReverted,
    TradeFailure,
    classify_execution_error,
    describe_execution_error,
)
from quoter.trading.orchestrator import (
    TradeOrchestrator,
    TradeOutcome,
    TradeState,
    check_balance,
)
from quoter.trading.poller import ReservePoller

__all__ = [
    # Orchestrator
    "TradeOrchestrator",
    "TradeOutcome",
    "TradeState",
    "ReservePoller",
    "check_balance",
    # Collaborators
    "ReserveReader",
    "BalanceReader",
    "Executor",
    "ExecutionRequest",
    "ExecutionResult",
    "TradeListener",
    "NullListener",
    # Config
    "TradingConfig",
    "DEFAULT_TRADING_CONFIG",
    # Errors
    "TradeFailure",
    "ExecutionError",
    "ExecutionRejected",
    "ExecutionReverted",
    "classify_execution_error",
    "describe_execution_error",
]
