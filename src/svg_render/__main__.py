"""Command line entry point for the SVG render service."""

import argparse
from typing import List, Optional

from .models.config import APIConfig
from .main import run


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="svg-render",
        description="Serve the SVG render API",
        epilog="Settings not given on the command line are read from SVG_RENDER_* environment variables.",
    )
    parser.add_argument('--host', help='Host to bind to')
    parser.add_argument('--port', '-p', type=int, help='Port to listen on')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--json-logs', action='store_true', default=None, help='Render logs as JSON')
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> APIConfig:
    """Merge command line overrides into the environment configuration."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
        "json_logs": args.json_logs,
    }
    config = APIConfig.from_env()
    return APIConfig(**{**config.model_dump(), **{k: v for k, v in overrides.items() if v is not None}})


def main(argv: Optional[List[str]] = None) -> None:
    """Run the service."""
    run(build_config(parse_arguments(argv)))


if __name__ == "__main__":
    main()
