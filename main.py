"""
Booking form entry point.

Opens the console booking form against the configured booking service,
authenticating with the token from the persisted session file when one is
present. Console mode uses the in-process simulated service instead.

Usage:
    Live service:  python main.py
    Console mode:  python main.py console
"""

import asyncio
import logging
import sys

from booking_intake.config import settings

logger = logging.getLogger(__name__)


def _run_live_mode() -> None:
    """Open the form against BOOKING_API_URL."""
    from console_demo import run_form

    logger.info("Posting bookings to %s", settings.api.base_url)
    asyncio.run(run_form(scenario=None, live=True))


def _run_console_mode() -> None:
    """Open the form against the simulated service (no backend required)."""
    from console_demo import run_form

    asyncio.run(run_form(scenario=None, live=False))


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "console":
        _run_console_mode()
    else:
        _run_live_mode()
