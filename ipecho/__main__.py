import logging

import uvicorn

from . import config

logger = logging.getLogger("ipecho")


def run():
    logging.basicConfig(
        # "trace" is uvicorn-only, the closest stdlib level is DEBUG
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Listening on %s:%s", config.HOST, config.PORT)
    uvicorn.run(
        "ipecho.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL,
    )


if __name__ == "__main__":
    run()
