import functools
import inspect
import logging
import os
import sys
from typing import Optional

from .config import Settings, load_settings
from .identity import FirebaseIdentity, SignedInUser
from .nws import NWSClient
from .registry import bind_tools
from .session import Session
from .tools import WeatherTools

logger = logging.getLogger("weather_auth.server")

SERVER_NAME = "weather"


def _as_mcp_handler(handler):
    """Wrap a ``ToolResult`` handler so FastMCP receives plain text content.

    The wrapper keeps the handler's parameters (FastMCP builds the input
    schema from them) but drops the return annotation so no structured
    output schema is generated.
    """
    @functools.wraps(handler)
    async def call(**kwargs):
        result = await handler(**kwargs)
        return result.to_mcp_content()

    signature = inspect.signature(handler)
    call.__signature__ = signature.replace(return_annotation=inspect.Signature.empty)
    call.__annotations__ = {
        k: v for k, v in getattr(handler, "__annotations__", {}).items() if k != "return"
    }
    return call


def _log_session_change(user: SignedInUser) -> None:
    logger.info(f"Session authenticated as {user.email}")


def build_tools(settings: Settings, session: Optional[Session] = None,
                nws: Optional[NWSClient] = None) -> WeatherTools:
    """Composition root: wire the session and NWS client into the handlers."""
    if session is None:
        session = Session(FirebaseIdentity(settings.firebase_api_key, timeout=settings.http_timeout))
        session.observe(_log_session_change)
    if nws is None:
        nws = NWSClient(settings.nws_api_base, settings.user_agent, settings.http_timeout)
    return WeatherTools(session, nws)


def create_server(settings: Optional[Settings] = None, session: Optional[Session] = None,
                  nws: Optional[NWSClient] = None):
    """Build the FastMCP server with every tool and auth resource registered."""
    from mcp.server.fastmcp import FastMCP

    settings = settings or load_settings()
    tools = build_tools(settings, session, nws)
    m = FastMCP(SERVER_NAME)

    for name, handler in bind_tools(tools).items():
        m.add_tool(_as_mcp_handler(handler), name=name, description=(handler.__doc__ or "").strip())

    m.resource("auth://login", name="auth-login", mime_type="application/json",
               description="How to authenticate with this server")(tools.login_document)
    m.resource("auth://status", name="auth-status", mime_type="application/json",
               description="Current authentication status")(tools.status_document)
    return m


def run_server(transport: str = "stdio", settings: Optional[Settings] = None) -> None:
    """Run the MCP server (convenience wrapper)."""
    m = create_server(settings)
    logger.info(f"Weather MCP Server with Authentication running on {transport}")
    m.run(transport=transport)


def configure_logging(settings: Settings) -> None:
    # stdout carries the MCP stream, so server logs go to a file
    os.makedirs(settings.log_dir, exist_ok=True)
    logging.basicConfig(
        filename=os.path.join(settings.log_dir, "weather_server.log"),
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def main() -> None:
    settings = load_settings()
    configure_logging(settings)
    try:
        run_server(settings=settings)
    except Exception as e:
        logger.exception(f"Fatal error in main(): {e}")
        print(f"Fatal error in main(): {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
