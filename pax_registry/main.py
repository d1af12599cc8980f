import argparse
import logging
from typing import List, Optional

from fastapi import FastAPI

from pax_registry import __version__, __package_name__
from pax_registry.api.packages import router as packages_router
from pax_registry.core.config import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application around a fixed registry configuration.

    The settings object is stored on `app.state` and handed to request
    handlers through dependencies; it is never modified afterwards.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="pax package registry",
        version=__version__,
        description="Read-only registry serving package metadata and archives from disk.",
    )
    app.state.settings = settings
    app.include_router(packages_router, tags=["packages"])

    logger.info(f"Using folder {settings.directory}")
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__package_name__,
        description="Serve package metadata and archives from a registry directory.",
    )
    parser.add_argument(
        "--directory", "-d",
        default=None,
        help="Registry root directory (default: $PAX_REGISTRY_DIRECTORY or the current directory)",
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="Port to listen on (default: $PAX_REGISTRY_PORT or 8080)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Interface to bind to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: INFO)",
    )
    return parser


def parse_settings(argv: Optional[List[str]] = None) -> Settings:
    """Parse command-line arguments into settings. Unknown flags exit with status 2."""
    args = build_parser().parse_args(argv)
    return Settings.from_env(
        directory=args.directory,
        port=args.port,
        host=args.host,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    import uvicorn

    settings = parse_settings(argv)
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info(f"Using port {settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
