#!/usr/bin/env python3
"""
Notas eCampus - Main Entry Point
Logs into eCampus UFAM and prints the grades table of a term
"""

import asyncio
import logging
import sys

from notas_ecampus.utils import load_config, resolve_credentials, ask_selector, print_table, Config, Credentials
from notas_ecampus.resources import SessionManager
from notas_ecampus.handlers import GradesHandler, GradesReport

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    """Configure logging to stderr, safe to call again once debug is known"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)


async def fetch_grades(config: Config, credentials: Credentials) -> GradesReport:
    """Open a browser session and run the grades workflow"""
    # Only ask for a term when someone can answer
    chooser = ask_selector if sys.stdin.isatty() else None

    async with SessionManager(headless=config.headless, timeout_ms=config.timeout_ms) as session:
        handler = GradesHandler(session, term=config.term, chooser=chooser)
        return await handler.fetch_grades(credentials)


def main():
    setup_logging()

    try:
        config = load_config()
        setup_logging(config.debug)

        credentials = resolve_credentials(config.login, config.password)
        report = asyncio.run(fetch_grades(config, credentials))

        print_table(report.rows)

    except KeyboardInterrupt:
        logger.error("Interrupted")
        sys.exit(1)
    except Exception as e:
        logger.error(f"\n--------------------\n{e}\n--------------------")
        sys.exit(1)


if __name__ == '__main__':
    main()
