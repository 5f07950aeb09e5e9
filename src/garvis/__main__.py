"""
Garvis Slack 봇 실행

    python -m garvis
"""

import asyncio
import logging
import signal
import sys

from .bot import GarvisBot, SlackTransport
from .config import load_settings
from .core.exceptions import ConfigurationError
from .factory import build_agent_manager
from .logger import setup_logging

logger = logging.getLogger("garvis")


async def start_garvis() -> None:
    settings = load_settings()
    setup_logging(settings)
    logger.info(
        "Starting Garvis AI Assistant",
        extra={"app_env": settings.app_env, "log_level": settings.log_level},
    )

    manager = build_agent_manager(settings)
    bot = GarvisBot(settings, manager)
    bot.transport = SlackTransport(settings, bot)

    await bot.start()
    logger.info("Garvis is now running!")

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    await stop_event.wait()
    logger.info("Shutting down gracefully...")
    await bot.stop()
    logger.info("Garvis shutdown completed")


def main() -> int:
    try:
        asyncio.run(start_garvis())
    except ConfigurationError as e:
        logging.basicConfig()
        logger.error(f"Configuration error: {e.message}", extra={"context": e.context})
        return 1
    except Exception:
        logger.exception("Failed to start Garvis")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
