"""
Sidecar Runner - invokes the transform utility as a child process

Each call spawns one child with the input string as its only argument and
blocks until the child exits. Concurrent calls share a bounded number of
slots, and a child that outlives the timeout is killed.
"""

import logging
import os
import subprocess
import threading
from pathlib import Path
from typing import Optional

from sidecar_encoder.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class SidecarError(RuntimeError):
    """Raised for every way a sidecar invocation can fail."""


def strip_line_terminator(text: str) -> str:
    """Remove a single trailing newline (or CRLF) the sidecar printed."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


class SidecarRunner:
    """
    Runs the sidecar executable found at `path`.

    At most `max_concurrency` children run at once. A caller waits up to
    `timeout` seconds for a free slot, and each child gets `timeout`
    seconds to finish before it is killed.
    """

    def __init__(self, path: Path, timeout: float = 10.0, max_concurrency: int = 16):
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

        # Anchored to the working directory so a bare name never triggers a PATH lookup
        self.path = Path(path).absolute()
        self.timeout = timeout
        self.max_concurrency = max_concurrency
        self._slots = threading.BoundedSemaphore(max_concurrency)

    @classmethod
    def from_settings(cls, cfg: Optional[Settings] = None) -> "SidecarRunner":
        cfg = cfg or get_settings()
        return cls(
            path=cfg.sidecar_path,
            timeout=cfg.sidecar_timeout,
            max_concurrency=cfg.max_concurrent_sidecars,
        )

    def is_available(self) -> bool:
        """True when the sidecar exists and is executable by this process."""
        return self.path.is_file() and os.access(self.path, os.X_OK)

    def run(self, data: str) -> str:
        """
        Invoke the sidecar with `data` and return its standard output verbatim.

        Raises:
            SidecarError: launch failure, non-zero exit, timeout, no free
                slot, or output that is not UTF-8.
        """
        if not self._slots.acquire(timeout=self.timeout):
            raise SidecarError(
                f"No free sidecar slot after {self.timeout}s "
                f"({self.max_concurrency} invocations running)"
            )

        try:
            completed = subprocess.run(
                [str(self.path), data],
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self.timeout,
                check=True,
            )
        except subprocess.TimeoutExpired as e:
            raise SidecarError(f"Sidecar {self.path} killed after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            msg = f"Sidecar {self.path} exited with status {e.returncode}"
            if stderr:
                msg += f"\nSTDERR:\n{stderr}"
            raise SidecarError(msg) from e
        except (OSError, ValueError) as e:
            # OSError: missing or non-executable file.
            # ValueError: argument the OS cannot carry (embedded NUL, lone surrogate).
            raise SidecarError(f"Could not launch sidecar {self.path}: {e}") from e
        finally:
            self._slots.release()

        try:
            return completed.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SidecarError(f"Sidecar {self.path} wrote non UTF-8 output") from e

    def encode(self, data: str) -> str:
        """Run the sidecar and return its output minus the trailing newline."""
        output = strip_line_terminator(self.run(data))
        logger.debug(f"Sidecar encoded {len(data)} chars into {len(output)} chars")
        return output
