import logging
import sys

import uvicorn

from .config import ConfigError, Settings
from .main import create_app

logger = logging.getLogger("vuesense")


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logger.error("ERROR: %s", e)
        sys.exit(1)

    logger.info("VueSense backend starting on port %d", settings.port)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
