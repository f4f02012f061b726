"""Pool and trading constants shared by the quoting engine and its callers."""

# Both pool assets (ETH and DEMO) use 18-decimal fixed point
TOKEN_DECIMALS = 18

# Slippage tolerance is expressed in basis points (100.00% = 10000)
BPS_DENOMINATOR = 10_000
MAX_SLIPPAGE_BPS = 10_000

# Default tolerance offered to a fresh trade form (1%)
DEFAULT_SLIPPAGE = "1.0"

# Floor for a minimum-output bound; a zero bound would accept any price
MIN_OUTPUT_SAFE = 1

# Seconds between reserve refreshes
RESERVES_POLL_INTERVAL = 5.0
