"""ASGI entry point: ``uvicorn apps.bfhl.main:app``.

Settings are read from the environment once, when this module is imported.
"""

from apps.bfhl import create_app
from lib.config.service_loader import load_service_config

config = load_service_config()
app = create_app(config)
