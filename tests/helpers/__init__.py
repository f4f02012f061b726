"""Test helpers module for shared test utilities.

- constants: Reserve snapshots and hand-computed expectations
- fakes: In-memory collaborators for the trade orchestrator
"""

from tests.helpers.constants import (
    EMPTY_RESERVES,
    SCENARIO_MIN_OUT_1PCT,
    SCENARIO_RESERVES,
    SCENARIO_SPEND_IN,
    SCENARIO_SPEND_OUT,
    SHALLOW_RESERVES,
    SMALL_RESERVES,
    WAD,
)
from tests.helpers.fakes import (
    FakeBalanceReader,
    FakeReserveReader,
    GatedExecutor,
    RecordingExecutor,
    RecordingListener,
)

__all__ = [
    # Constants
    "WAD",
    "SMALL_RESERVES",
    "SCENARIO_RESERVES",
    "SHALLOW_RESERVES",
    "EMPTY_RESERVES",
    "SCENARIO_SPEND_IN",
    "SCENARIO_SPEND_OUT",
    "SCENARIO_MIN_OUT_1PCT",
    # Fakes
    "RecordingExecutor",
    "GatedExecutor",
    "RecordingListener",
    "FakeReserveReader",
    "FakeBalanceReader",
]
