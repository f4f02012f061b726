"""Trading configuration."""

from dataclasses import dataclass

from quoter.constants import DEFAULT_SLIPPAGE, MIN_OUTPUT_SAFE, RESERVES_POLL_INTERVAL


@dataclass(frozen=True)
class TradingConfig:
    """Settings for a trade form and its reserve refresh loop.

    Attributes:
        default_slippage: Tolerance text a new form starts with
        reserves_poll_interval: Seconds between reserve refreshes
        min_output: Floor applied to minimum-output bounds
        check_balance: If True, sell trades needing more DEMO than the
            caller holds fail with INSUFFICIENT_BALANCE before execution
    """

    default_slippage: str = DEFAULT_SLIPPAGE
    reserves_poll_interval: float = RESERVES_POLL_INTERVAL
    min_output: int = MIN_OUTPUT_SAFE
    check_balance: bool = True


# Default configuration instance
DEFAULT_TRADING_CONFIG = TradingConfig()
