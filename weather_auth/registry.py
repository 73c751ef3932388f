"""Tool registry: which ``WeatherTools`` methods are served, and under what name.

The decorator only records the name; descriptions come from the docstring and
input schemas from the annotated parameters when the MCP layer registers the
bound handlers returned by :func:`bind_tools`.
"""
from typing import Any, Awaitable, Callable

# (tool name, attribute name on WeatherTools)
_REGISTERED: list[tuple[str, str]] = []


def tool(name: str):
    """Serve the decorated ``WeatherTools`` method as ``name``.

    Use as ``@tool("get-alerts")``.
    """
    def decorator(fn):
        _REGISTERED.append((name, fn.__name__))
        return fn
    return decorator


def bind_tools(tools: Any) -> dict[str, Callable[..., Awaitable[Any]]]:
    """Map every registered tool name to the bound handler on ``tools``."""
    return {name: getattr(tools, attr) for name, attr in _REGISTERED}
