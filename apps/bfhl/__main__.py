"""Run the service with ``python -m apps.bfhl``."""

import uvicorn

from lib.telemetry.logger import configure_logging

from .main import config

if __name__ == "__main__":
    configure_logging(config.log_level)
    uvicorn.run("apps.bfhl.main:app", host=config.host, port=config.port, log_level=config.log_level.lower())
