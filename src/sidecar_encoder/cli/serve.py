"""
CLI for running the encoder API server.
"""

import argparse
import logging
from typing import List, Optional

import uvicorn

from sidecar_encoder import logging_setup
from sidecar_encoder.settings import get_settings

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    cfg = get_settings()

    p = argparse.ArgumentParser(description="Run the sidecar encoder HTTP API")
    p.add_argument("--host", default=cfg.api_host, help="Interface to bind")
    p.add_argument("--port", type=int, default=cfg.api_port, help="Port to listen on")
    p.add_argument("--reload", action="store_true", default=cfg.api_reload,
                   help="Auto-reload on code changes (dev only)")
    p.add_argument("--log_level", default=None,
                   help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to APP_LOG_LEVEL")

    a = p.parse_args(argv)

    level = logging_setup.setup_logging(a.log_level)
    logger.info(f"Server running on port {a.port} (host={a.host}, env={cfg.env})")

    uvicorn.run(
        "api.main:app",
        host=a.host,
        port=a.port,
        reload=a.reload,
        log_level=logging.getLevelName(level).lower()
    )
    return 0


if __name__ == "__main__":
    exit(main())
