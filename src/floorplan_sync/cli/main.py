"""Main CLI entry point."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from floorplan_sync.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    """Configure root logging once for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Reduce noise from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="floorplan-sync", description="Sync Entrata floorplans to Webflow CMS")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR). Default: LOG_LEVEL or INFO",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # sync
    sync_parser = subparsers.add_parser("sync", help="Sync all configured properties (scheduled entry point)")
    sync_parser.add_argument(
        "--properties-file",
        type=Path,
        default=None,
        help="JSON or YAML property list (default: PROPERTIES / PROPERTIES_FILE env)",
    )
    sync_parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing property instead of continuing",
    )

    # fetch
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and normalize one property without publishing")
    fetch_parser.add_argument(
        "--property",
        required=True,
        help="Entrata property ID or configured property name",
    )
    fetch_parser.add_argument(
        "--properties-file",
        type=Path,
        default=None,
        help="JSON or YAML property list",
    )
    fetch_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write normalized JSON to file (default: stdout)",
    )

    # methods
    subparsers.add_parser("methods", help="List known Entrata method presets")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP trigger (POST /sync)")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument(
        "--every",
        type=float,
        default=None,
        metavar="MINUTES",
        help="Also run the sync on an interval while serving",
    )

    args = parser.parse_args(argv)
    _setup_logging(args.log_level or os.environ.get("LOG_LEVEL", "INFO"))

    if args.command == "sync":
        _run_sync(args)
    elif args.command == "fetch":
        _run_fetch(args)
    elif args.command == "methods":
        _run_methods(args)
    elif args.command == "serve":
        _run_serve(args)
    else:
        parser.print_help()


def _run_sync(args: argparse.Namespace) -> None:
    """Run sync command. Exits 1 on any failure."""
    from floorplan_sync.config import Settings
    from floorplan_sync.pipeline import PROPERTY_ERRORS, sync_all

    try:
        settings = Settings.from_env(properties_file=args.properties_file)
        if args.fail_fast:
            settings = settings.model_copy(update={"fail_fast": True})
        report = sync_all(settings)
    except PROPERTY_ERRORS as e:
        logger.error("Sync failed: %s", e)
        print(f"Sync failed: {e}", file=sys.stderr)
        raise SystemExit(1)

    total = sum(r.published for r in report.results)
    print(f"Synced {total} items across {len(report.results)} properties")


def _run_fetch(args: argparse.Namespace) -> None:
    """Run fetch command."""
    from floorplan_sync.config import Settings
    from floorplan_sync.connectors.entrata import EntrataConnector
    from floorplan_sync.models.property import PropertyConfig
    from floorplan_sync.pipeline import PROPERTY_ERRORS, preview_property

    try:
        settings = Settings.from_env(properties_file=args.properties_file, require_properties=False)
        settings.require_secrets(destination=False)
    except ConfigError as e:
        raise SystemExit(f"Configuration error: {e}")

    config = next(
        (p for p in settings.properties if args.property in (p.entrata_property_id, p.name)),
        None,
    )
    if config is None:
        config = PropertyConfig(
            entrata_property_id=args.property,
            webflow_site_id="preview",
            webflow_collection_id="preview",
        )

    connector = EntrataConnector.from_settings(settings)
    try:
        items = preview_property(config, connector)
    except PROPERTY_ERRORS as e:
        print(f"Fetch failed: {e}", file=sys.stderr)
        raise SystemExit(1)

    output = json.dumps([item.to_field_data() for item in items], indent=2, default=str)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(items)} items to {args.output}")
    else:
        print(output)


def _run_methods(args: argparse.Namespace) -> None:
    """Print method presets."""
    from floorplan_sync.connectors.entrata import METHODS

    for key, method in METHODS.items():
        print(f"{key:<24} {method.resource}/{method.name} ({method.property_id_param})  {method.description}")


def _run_serve(args: argparse.Namespace) -> None:
    """Run the FastAPI app with uvicorn."""
    import uvicorn

    from floorplan_sync.api.app import create_app

    app = create_app(schedule_minutes=args.every)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
