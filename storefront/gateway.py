"""
Async Gateway - Simulated Network Boundary

Every cart and checkout intent goes through AsyncGateway.run, which:
- marks the store busy and clears the previous error
- queues the call behind any in-flight operation (FIFO)
- suspends for the simulated latency before the effect becomes visible
- records a human-readable error on failure and re-raises it

The busy flag stays true until the queue drains, so observers never see
the cart between two queued mutations as "idle".
"""
import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, TypeVar

from storefront.config import get_api_latency
from storefront.errors import ERROR_INTERNAL, OperationError
from storefront.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class OperationState:
    """Read-only view of the gateway state."""
    busy: bool = False
    last_error: Optional[str] = None


class AsyncGateway:
    """Serializes operations behind a simulated round trip."""

    def __init__(self, latency: Optional[float] = None):
        self.latency = get_api_latency() if latency is None else max(latency, 0.0)
        self._lock = asyncio.Lock()
        self._pending = 0
        self._last_error: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self._pending > 0

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def state(self) -> OperationState:
        return OperationState(busy=self.busy, last_error=self._last_error)

    def clear_error(self) -> None:
        """Dismiss the current error."""
        self._last_error = None

    def reject(self, error: OperationError) -> None:
        """
        Surface a precondition failure without dispatching.

        Counts as a new intent: the previous error is replaced. No latency
        is simulated and the busy flag is untouched.
        """
        self._last_error = error.message
        logger.warning(f"Operation rejected: {error.message}")
        raise error

    async def run(self, operation: Callable[[], T], *, name: str = "operation") -> T:
        """
        Run operation after the simulated latency, in submission order.

        Raises:
            OperationError: the operation failed; last_error holds its message
        """
        self._pending += 1
        self._last_error = None
        try:
            async with self._lock:
                # A queued intent clears whatever the previous one left behind
                self._last_error = None
                logger.debug(f"Dispatching {name} (queue depth {self._pending})")
                await asyncio.sleep(self.latency)
                try:
                    return operation()
                except OperationError as e:
                    self._last_error = e.message
                    logger.warning(f"{name} failed: {e.message}")
                    raise
                except Exception as e:
                    self._last_error = ERROR_INTERNAL
                    logger.error(f"{name} failed unexpectedly: {e}", exc_info=True)
                    raise OperationError(ERROR_INTERNAL) from e
        finally:
            self._pending -= 1


__all__ = [
    "OperationState",
    "AsyncGateway",
]
