import asyncio
import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from prometheus_client import Counter, Gauge

from arbitrage_engine.app.core.config import EngineConfig
from arbitrage_engine.app.models import ProcessResult
from arbitrage_engine.app.utils import error_message

logger = logging.getLogger(__name__)

executions_total = Counter(
    "engine_executions_total", "Engine executions by outcome", ["outcome"]
)
last_processing_duration = Gauge(
    "engine_last_processing_duration_seconds",
    "Duration of the most recent successful execution",
)

PROCESS_DELAY_MS = 100


class ArbitrageEngine:
    """Runs the core processing step with timing, diagnostics and error translation."""

    def __init__(self, config: Optional[Union[EngineConfig, Mapping[str, Any]]] = None):
        if isinstance(config, EngineConfig):
            self.config = config
        else:
            self.config = EngineConfig.create(config)
        self._processed = 0
        self._processed_lock = threading.Lock()

    async def execute(self) -> ProcessResult:
        """Run one processing pass and describe its outcome.

        Never raises for an ``Exception`` from the processing step; the
        failure is returned as an unsuccessful result instead.
        """
        start_time = time.monotonic()

        try:
            if self.config.verbose:
                logger.info("Initializing ArbitrageEngine processor...")

            result = await self._process()

            duration = int((time.monotonic() - start_time) * 1000)

            if self.config.verbose:
                logger.info(f"Processing completed in {duration}ms")

            executions_total.labels(outcome="success").inc()
            last_processing_duration.set(duration / 1000)
            return ProcessResult.ok(result)

        except Exception as e:
            executions_total.labels(outcome="failure").inc()
            return ProcessResult.failed(error_message(e))

    async def _process(self) -> Dict[str, Any]:
        """Core processing step. Override with real logic."""
        await self._delay(PROCESS_DELAY_MS)

        with self._processed_lock:
            self._processed += 1
            processed = self._processed

        return {
            "processed": processed,
            "status": "completed",
            "timestamp": _iso_timestamp(),
        }

    async def _delay(self, ms: float) -> None:
        await asyncio.sleep(ms / 1000)


def _iso_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
