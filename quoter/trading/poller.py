"""Periodic reserve refresh for a trade orchestrator."""

from __future__ import annotations

import asyncio

import structlog

from quoter.trading.collaborators import BalanceReader, ReserveReader
from quoter.trading.orchestrator import TradeOrchestrator

logger = structlog.get_logger()


class ReservePoller:
    """Pulls reserves (and the caller's balance) on a fixed interval.

    Reserves are treated as eventually consistent: a failed read keeps the
    previous snapshot and the loop carries on.

    Args:
        reserve_reader: Source of reserve snapshots
        orchestrator: Receives each snapshot
        balance_reader: Optional source of the caller's DEMO balance
        interval: Seconds between reads (defaults to the orchestrator's config)
    """

    def __init__(
        self,
        reserve_reader: ReserveReader,
        orchestrator: TradeOrchestrator,
        balance_reader: BalanceReader | None = None,
        interval: float | None = None,
    ) -> None:
        self.reserve_reader = reserve_reader
        self.orchestrator = orchestrator
        self.balance_reader = balance_reader
        self.interval = (
            interval if interval is not None else orchestrator.config.reserves_poll_interval
        )
        self._stop = asyncio.Event()

    async def poll_once(self) -> bool:
        """Read once and push the snapshot into the orchestrator.

        Returns:
            True if the snapshot was applied
        """
        try:
            if self.balance_reader is None:
                reserves = await self.reserve_reader.read_reserves()
                balance = None
            else:
                reserves, balance = await asyncio.gather(
                    self.reserve_reader.read_reserves(),
                    self.balance_reader.read_balance(),
                )
        except Exception:
            logger.exception("reserve_refresh_failed")
            return False

        self.orchestrator.update_market(reserves, balance)
        return True

    async def run(self, iterations: int | None = None) -> None:
        """Poll until stop() is called (or for a fixed number of iterations)."""
        self._stop.clear()
        count = 0
        while not self._stop.is_set():
            await self.poll_once()
            count += 1
            if iterations is not None and count >= iterations:
                break
            try:
                await asyncio.wait_for(self._stop.wait(), timeout=self.interval)
            except TimeoutError:
                pass

    def stop(self) -> None:
        self._stop.set()
