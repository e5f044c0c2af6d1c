"""
API Dependencies - Singleton state management and FastAPI dependency injection

Holds the sidecar runner shared by every request. The runner owns the
admission gate, so there must be exactly one per process.
"""

import logging
import threading
from typing import Optional
from contextlib import asynccontextmanager

from sidecar_encoder.settings import get_settings
from sidecar_encoder.sidecar_runner import SidecarRunner

logger = logging.getLogger(__name__)


class AppState:
    """
    Global application state - holds the sidecar runner.

    Singleton pattern: one instance shared across all requests.
    """

    def __init__(self):
        self.runner: Optional[SidecarRunner] = None
        self._lock = threading.Lock()

    def initialize(self) -> SidecarRunner:
        """Build the runner from settings once; later calls return it."""
        with self._lock:
            if self.runner is None:
                cfg = get_settings()
                self.runner = SidecarRunner.from_settings(cfg)
                logger.info(
                    f"Sidecar runner ready: path={self.runner.path}, "
                    f"timeout={self.runner.timeout}s, "
                    f"max_concurrency={self.runner.max_concurrency}"
                )
                if not self.runner.is_available():
                    logger.warning(
                        f"Sidecar not found or not executable at {self.runner.path}. "
                        "Encode requests will fail until it is installed."
                    )
            return self.runner

    def reset(self) -> None:
        with self._lock:
            self.runner = None


# Global singleton instance
app_state = AppState()


def get_runner() -> SidecarRunner:
    """
    FastAPI dependency to access the sidecar runner.

    Usage in routers:
        @router.post("/example")
        def example(runner: SidecarRunner = Depends(get_runner)):
            return runner.encode("...")
    """
    return app_state.initialize()


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    logger.info("FastAPI starting up...")
    app_state.initialize()

    yield  # App is now running

    logger.info("FastAPI shutting down...")
    app_state.reset()
