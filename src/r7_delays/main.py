"""Main entry point for the R7 delays web service."""

import asyncio
import logging
import sys

from r7_delays.adapters.config import AppConfig, RouteConfigurationLoader
from r7_delays.adapters.web import StarletteWebAdapter
from r7_delays.bootstrap import build_delay_resolver, open_upstream_session

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
        route = RouteConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(f"Loaded route {route.name} with {len(route.stops)} stop(s)")

    async with open_upstream_session(config) as session:
        delay_resolver = build_delay_resolver(config, route, session)
        web_adapter = StarletteWebAdapter(delay_resolver, config)

        try:
            await web_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
