"""Append-only log of the HTTP calls made to Confluence.

Enabled with CONFLUENCE_LOG_REQUESTS=true. Each response adds one line:

    2025-01-01 12:00:00 | GET    | 200 |   150ms | https://.../rest/api/content/1
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from requests import Response, Session

from .env import is_env_truthy

logger = logging.getLogger(__name__)

# Relative to the working directory of the server process
REQUESTS_LOG_FILE = ".confluence-publisher/requests.log"
LOG_LINE_FORMAT = "{timestamp} | {method:6} | {status} | {elapsed_ms:5}ms | {url}\n"


def is_request_logging_enabled() -> bool:
    return is_env_truthy("CONFLUENCE_LOG_REQUESTS")


def format_log_line(response: Response) -> str:
    """Render one log line for a response.

    Only the method, status, timing and URL are written, never headers, so
    credentials stay out of the log.
    """
    request = response.request
    return LOG_LINE_FORMAT.format(
        timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S"),
        method=request.method or "GET",
        status=response.status_code,
        elapsed_ms=int(response.elapsed.total_seconds() * 1000),
        url=request.url or "",
    )


def log_request(response: Response, *args, **kwargs) -> None:
    """requests response hook writing the call to REQUESTS_LOG_FILE."""
    try:
        log_path = Path(REQUESTS_LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as f:
            f.write(format_log_line(response))
    except Exception as e:
        # The API call itself already succeeded or failed on its own
        logger.debug(f"Failed to log request: {e}")


def install_request_logging(session: Session) -> None:
    """Add the log_request hook to the session, once, when logging is enabled."""
    if not is_request_logging_enabled():
        return

    hooks = session.hooks.setdefault("response", [])
    if log_request not in hooks:
        hooks.append(log_request)
        logger.debug("Request logging installed on session")
