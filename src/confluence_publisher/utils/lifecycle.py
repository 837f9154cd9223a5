"""Process lifecycle helpers for the stdio server."""

import logging
import signal
import sys

logger = logging.getLogger("confluence-publisher.utils.lifecycle")


def _signal_handler(signum: int, frame) -> None:
    logger.info(f"Received signal {signal.Signals(signum).name}, shutting down")
    sys.exit(0)


def setup_signal_handlers() -> None:
    """Exit cleanly on SIGTERM and SIGINT (and SIGPIPE where available)."""
    signal.signal(signal.SIGTERM, _signal_handler)
    signal.signal(signal.SIGINT, _signal_handler)
    if hasattr(signal, "SIGPIPE"):
        signal.signal(signal.SIGPIPE, _signal_handler)


def ensure_clean_exit() -> None:
    """Flush the standard streams before the interpreter exits."""
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            # stream already closed by the client
            pass
