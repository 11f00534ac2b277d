"""Run the plaza server: ``python -m plaza``."""
from __future__ import annotations

import logging

import uvicorn

from .config import get_settings

logger = logging.getLogger("plaza")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Plaza server listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "plaza.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
