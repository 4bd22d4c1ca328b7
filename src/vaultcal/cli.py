"""CLI entry point: scan a vault and print the events found."""

import argparse
import json
import logging
import sys
from pathlib import Path

from vaultcal.config import get_settings
from vaultcal.events.filters import EventQuery
from vaultcal.events.scanner import ScanResult, scan_vault_for_events
from vaultcal.models import EventResponse
from vaultcal.vault.connector import VaultConnector

logger = logging.getLogger("vaultcal.cli")


def _print_text(result: ScanResult) -> None:
    for event in result.events:
        print(f"{event.start:%Y-%m-%d}  {event.title}  ({event.path}:{event.line + 1})")
    for failure in result.failures:
        print(f"FAILED {failure.path}: {failure.error}", file=sys.stderr)


def _print_json(result: ScanResult) -> None:
    payload = {
        "events": [EventResponse.from_event(e).model_dump(mode="json") for e in result.events],
        "failures": [{"path": f.path, "error": f.error} for f in result.failures],
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Extract calendar events from an Obsidian vault")
    parser.add_argument(
        "command",
        nargs="?",
        default="scan",
        choices=["scan", "serve"],
        help="What to run: print events, or serve the events API (default: scan)",
    )
    parser.add_argument(
        "--vault-path",
        type=Path,
        default=None,
        help="Override vault path (default: from config/env)",
    )
    parser.add_argument(
        "--folder",
        action="append",
        default=[],
        help="Only events from notes under this folder prefix (repeatable)",
    )
    parser.add_argument("--content", default=None, help="Regex the event title must match")
    parser.add_argument("--event-type", default=None, help="Only events of this type")
    parser.add_argument("--json", action="store_true", help="Print events as JSON")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = get_settings()
    if args.command == "serve":
        import uvicorn

        uvicorn.run("vaultcal.main:app", host=settings.host, port=settings.port)
        return

    vault_path = args.vault_path or settings.vault_path
    if vault_path is None:
        logger.error("No vault path configured. Set VAULTCAL_VAULT_PATH or use --vault-path")
        sys.exit(1)

    vault_path = Path(vault_path)
    if not vault_path.exists():
        logger.error("Vault path does not exist: %s", vault_path)
        sys.exit(1)

    connector = VaultConnector(
        vault_path,
        include_patterns=settings.include_patterns,
        exclude_patterns=settings.exclude_patterns,
    )
    query = EventQuery(
        event_type=args.event_type,
        content_regex=args.content,
        folder_paths=args.folder,
    )
    result = scan_vault_for_events(
        connector,
        query,
        event_type=settings.default_event_type,
        parse_below_token=settings.process_entries_below,
    )
    logger.info(
        "Found %d events, %d unreadable notes, %d bad entries",
        len(result.events),
        len(result.failures),
        len(result.entry_errors),
    )

    if args.json:
        _print_json(result)
    else:
        _print_text(result)


if __name__ == "__main__":
    main()
