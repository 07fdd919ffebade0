"""Server module entry point for running with python -m server."""

import uvicorn

from server.server_config import HOST, PORT, RELOAD
from zastepstwa.utils.logging_config import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info(
        "Starting zastepstwa proxy",
        extra={
            "host": HOST,
            "port": PORT,
        },
    )

    uvicorn.run(
        "server.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_config=None,  # Disable uvicorn's default logging config
    )
