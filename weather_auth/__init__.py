"""Weather MCP server with session authentication.

The server module (and with it MCP) is only imported when one of its
attributes is accessed, so ``python -m weather_auth.server`` does not trigger
a ``RuntimeWarning`` about the module already being in ``sys.modules``.
"""

from importlib import import_module

from .outcome import Denied, Ok, Unavailable
from .result import TextBlock, ToolResult
from .session import AUTH_REQUIRED_TEXT, Session, require_auth

__all__ = [
    "AUTH_REQUIRED_TEXT",
    "Denied",
    "Ok",
    "Session",
    "TextBlock",
    "ToolResult",
    "Unavailable",
    "require_auth",
    "build_tools",
    "create_server",
    "main",
    "run_server",
]

# Attributes provided by the server module.
_server_attrs = {
    "build_tools",
    "create_server",
    "main",
    "run_server",
}


def _load_server():
    return import_module(".server", __package__)


def __getattr__(name: str):
    if name in _server_attrs:
        return getattr(_load_server(), name)
    raise AttributeError(f"module {__name__} has no attribute {name}")


def __dir__():
    return sorted(list(globals().keys()) + list(_server_attrs))
