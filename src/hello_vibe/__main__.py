"""Run the Hello Vibe API with uvicorn."""
import logging

import uvicorn

from hello_vibe.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s on %s:%d", settings.title, settings.host, settings.port)
    uvicorn.run(
        "hello_vibe.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
