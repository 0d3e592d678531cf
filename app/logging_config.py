"""
logging_config.py
------------------

This module defines a shared logging configuration and utilities for
structured logging throughout the storefront catalog.  It uses
Python's built‑in ``logging`` module rather than ``print`` so that
log output can be captured by standard logging handlers or external
systems.  Messages are serialised as JSON to make them easier to parse
downstream.

To use this module, import ``logger`` and call its methods instead
of ``logging.info`` directly.  The ``log_call`` decorator can be
applied to functions (plain or ``async``) to record entry and exit
points at the DEBUG level without leaking sensitive information such
as API keys.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

# -----------------------------------------------------------------------------
# Configure global logging
# -----------------------------------------------------------------------------

# Set up the root logger once.  We direct log output to stdout and format
# messages with a timestamp, log level and the raw message.  The message
# itself should be a JSON string so downstream consumers can parse it easily.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger("catalog")

_SENSITIVE_KEYS = ("token", "password", "secret", "apikey", "api_key")
_SENSITIVE_HEADERS = {"authorization", "apikey"}


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries will have keys containing 'token', 'password', 'secret'
    or 'apikey' removed.  Lists and tuples are processed element‑wise.
    Pydantic models are dumped first.  Anything that is still not JSON
    serialisable is returned as its ``str``.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in _SENSITIVE_KEYS):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        try:
            return _sanitize(obj.model_dump())
        except Exception:
            return str(obj)
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def _log_start(name: str, args: Any, kwargs: Any) -> None:
    try:
        logger.debug(json.dumps({
            "event": "call_start",
            "function": name,
            "args": _sanitize(args),
            "kwargs": _sanitize(kwargs),
        }))
    except Exception:
        logger.debug(json.dumps({"event": "call_start", "function": name}))


def _log_end(name: str, result: Any) -> None:
    try:
        logger.debug(json.dumps({
            "event": "call_end",
            "function": name,
            "result": _sanitize(result),
        }))
    except Exception:
        logger.debug(json.dumps({"event": "call_end", "function": name}))


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    This decorator logs a DEBUG level message before a function is executed
    and another after it returns.  The messages include the function name
    and a sanitised snapshot of the arguments and return value.  Coroutine
    functions are wrapped with an ``async`` wrapper so FastAPI still sees
    them as coroutines.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _log_start(func.__name__, args, kwargs)
            result = await func(*args, **kwargs)
            _log_end(func.__name__, result)
            return result

        return async_wrapper

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _log_start(func.__name__, args, kwargs)
        result = func(*args, **kwargs)
        _log_end(func.__name__, result)
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     params: Dict[str, Any] | None = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Credential headers (``Authorization`` and ``apikey``) are removed and
    only high‑level information (method, URL, params, status and duration)
    is recorded.  The HTTP client calls this once per attempt.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    params : dict, optional
        Query parameters.
    status : int, optional
        Response status code, ``None`` when no response was received.
    duration_ms : float, optional
        Time taken in milliseconds.
    """
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in _SENSITIVE_HEADERS}
    if params:
        data["params"] = _sanitize(params)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
