"""Trade failure types and execution error classification.

Executors report failures either as an ExecutionResult or by raising.
Raised errors from wallet and chain libraries are untyped, so their
messages are classified here the same way the web client does it.
"""

from __future__ import annotations

from enum import Enum


class TradeFailure(Enum):
    """Reasons a trade attempt did not execute."""

    INVALID_SLIPPAGE = "invalid_slippage"
    EXECUTION_REJECTED = "execution_rejected"
    EXECUTION_REVERTED = "execution_reverted"
    NOT_READY = "not_ready"
    TRADE_IN_FLIGHT = "trade_in_flight"


class ExecutionError(Exception):
    """Base class for errors raised by an executor."""

    failure = TradeFailure.EXECUTION_REVERTED


class ExecutionRejected(ExecutionError):
    """The signer declined the transaction."""

    failure = TradeFailure.EXECUTION_REJECTED


class ExecutionReverted(ExecutionError):
    """The transaction was mined but reverted, or never confirmed."""

    failure = TradeFailure.EXECUTION_REVERTED


ERROR_MESSAGES = {
    "USER_DENIED": "You rejected the transaction. Click to try again.",
    "INSUFFICIENT_GAS": "Not enough ETH for gas fees. Add funds to your wallet.",
    "NETWORK_ERROR": "Network connection issue. Check your internet and retry.",
    "POOL_NOT_FUNDED": "Market maker needs ETH liquidity. Cannot trade yet.",
    "SLIPPAGE_EXCEEDED": "Price moved too much. Increase slippage tolerance and retry.",
    "INSUFFICIENT_BALANCE": "Not enough tokens in your wallet for this trade.",
}

# Checked in order; the first matching group wins
_MESSAGE_PATTERNS: list[tuple[str, tuple[str, ...]]] = [
    ("USER_DENIED", ("user rejected", "user denied")),
    ("INSUFFICIENT_GAS", ("insufficient funds", "gas required exceeds")),
    ("NETWORK_ERROR", ("network", "timeout", "failed to fetch")),
    ("SLIPPAGE_EXCEEDED", ("slippage", "price", "insufficient output")),
    ("INSUFFICIENT_BALANCE", ("insufficient balance", "exceeds balance")),
    ("POOL_NOT_FUNDED", ("pool", "reserve")),
]

DEFAULT_FAILURE_MESSAGE = "Transaction failed. Please try again."


def _match_code(message: str) -> str | None:
    lowered = message.lower()
    for code, needles in _MESSAGE_PATTERNS:
        if any(needle in lowered for needle in needles):
            return code
    return None


def classify_execution_error(error: BaseException) -> TradeFailure:
    """Map an exception raised during execution to a TradeFailure."""
    if isinstance(error, ExecutionError):
        return error.failure
    if _match_code(str(error)) == "USER_DENIED":
        return TradeFailure.EXECUTION_REJECTED
    return TradeFailure.EXECUTION_REVERTED


def describe_execution_error(message: str | None) -> str:
    """Turn a raw wallet or chain error message into user-facing text.

    Unrecognised messages are returned unchanged.
    """
    if not message:
        return DEFAULT_FAILURE_MESSAGE
    code = _match_code(message)
    if code is None:
        return message
    return ERROR_MESSAGES[code]
