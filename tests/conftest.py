"""Pytest configuration and fixtures."""

import pytest

from quoter.amm.constant_product import ConstantProduct, Reserves
from quoter.trading.orchestrator import TradeOrchestrator
from tests.helpers import SCENARIO_RESERVES, RecordingExecutor, RecordingListener


@pytest.fixture
def amm() -> ConstantProduct:
    """A constant product math instance."""
    return ConstantProduct()


@pytest.fixture
def scenario_reserves() -> Reserves:
    """10,000 ETH / 1,000,000 DEMO."""
    return SCENARIO_RESERVES


@pytest.fixture
def executor() -> RecordingExecutor:
    """An executor that always confirms."""
    return RecordingExecutor()


@pytest.fixture
def listener() -> RecordingListener:
    """A listener that records every event."""
    return RecordingListener()


@pytest.fixture
def orchestrator(
    executor: RecordingExecutor,
    listener: RecordingListener,
    scenario_reserves: Reserves,
) -> TradeOrchestrator:
    """An orchestrator on the scenario pool with default 1% slippage."""
    return TradeOrchestrator(
        executor=executor,
        listener=listener,
        reserves=scenario_reserves,
    )
