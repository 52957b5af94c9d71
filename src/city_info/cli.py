"""Command-line interface for the city info API."""

import argparse
import asyncio
import logging
import sys

from city_info import __version__
from city_info.config import get_settings


async def _init_db(seed: bool) -> int:
    from city_info.database.connection import close_db, create_tables, get_db, init_db
    from city_info.database.seed import seed_database

    await init_db()
    try:
        await create_tables()
        inserted = 0
        if seed:
            async with get_db() as session:
                inserted = await seed_database(session)
    finally:
        await close_db()
    return inserted


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="City Info API - cities, points of interest and file transfer"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", help="Bind address (default from settings)")
    serve_parser.add_argument("--port", type=int, help="Port (default from settings)")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes"
    )

    # Init-db command
    init_parser = subparsers.add_parser(
        "init-db", help="Create database tables and load seed data"
    )
    init_parser.add_argument(
        "--no-seed", action="store_true", help="Only create tables"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        import uvicorn

        uvicorn.run(
            "city_info.api:create_app",
            factory=True,
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
            log_level=settings.log_level.lower(),
        )
        return 0

    if args.command == "init-db":
        inserted = asyncio.run(_init_db(seed=not args.no_seed))
        print(f"Database ready ({inserted} cities seeded)")
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
