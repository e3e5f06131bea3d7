# Core: configuration, request context, logging

from accountapi.core.config import (
    DEFAULT_ADDRESS,
    DEFAULT_REQUEST_TIMEOUT,
    Config,
    Settings,
    get_settings,
    new_config,
)
from accountapi.core.context import RequestContext, effective_timeout
from accountapi.core.logging import resolve_logger, setup_logging

__all__ = [
    "DEFAULT_ADDRESS",
    "DEFAULT_REQUEST_TIMEOUT",
    "Config",
    "Settings",
    "get_settings",
    "new_config",
    "RequestContext",
    "effective_timeout",
    "resolve_logger",
    "setup_logging",
]
