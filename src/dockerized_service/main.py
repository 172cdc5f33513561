"""
ASGI entry point: ``uvicorn dockerized_service.main:app``.

Importing this module reads the environment and configures logging;
use ``application.create_app`` to build an app without side effects.
"""
from .application import create_app
from .core import Settings, setup_logging

_settings = Settings.from_env()
setup_logging(_settings.log_level)

app = create_app(_settings)
