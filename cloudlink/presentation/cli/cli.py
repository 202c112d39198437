"""
CLI Module

Architectural Intent:
- Command-line interface for replaying messages through the CloudLink bus
- Wires dependencies through the composition root
- Supports --verbose/--debug flags for log level control

Replay file format (JSON list):
    [{"endpoint": "neutron:network", "headers": {"operation": "create", "name": "net"}},
     {"endpoint": "neutron:port", "headers": {"operation": "getAll"}}]

Each processed message is printed as one JSON line:
    {"endpoint": ..., "fault": ..., "body": ...}
"""

import argparse
import json
import logging
import sys
import traceback
from typing import Any, Optional

from cloudlink.composition_root import create_container
from cloudlink.domain.entities.resource import Resource
from cloudlink.infrastructure.config import load_config
from cloudlink.infrastructure.logging import configure_logging
from cloudlink.infrastructure.message import Message

logger = logging.getLogger(__name__)


def _serialize_body(body: Any) -> Any:
    if isinstance(body, Resource):
        return body.to_dict()
    if isinstance(body, (list, tuple)):
        return [_serialize_body(item) for item in body]
    return body


def _load_messages(path: str) -> list[dict]:
    with open(path) as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError("Replay file must contain a JSON list of messages")
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Replay entry {index} must be a JSON object")
        if not isinstance(entry.get("headers", {}), dict):
            raise ValueError(f"Replay entry {index} headers must be a JSON object")
    return entries


def _decode_body(producer, body: Any) -> Any:
    """Turn a JSON object body into the endpoint's resource type."""
    if isinstance(body, dict) and producer is not None:
        return producer.descriptor.resource_type.from_dict(body)
    return body


def _replay(container, entries: list[dict]) -> int:
    faults = 0
    for entry in entries:
        endpoint = entry.get("endpoint", "")
        message = Message(headers=entry.get("headers", {}))
        try:
            message.set_body(
                _decode_body(container.producers.get(endpoint), entry.get("body"))
            )
        except (TypeError, ValueError) as e:
            logger.warning("Undecodable body for %s: %s", endpoint, e)
            message.set_fault(True)
            message.set_body(f"invalid body for {endpoint}: {e}")
        else:
            container.bus.send(endpoint, message)
        faults += int(message.fault)

        print(
            json.dumps(
                {
                    "endpoint": endpoint,
                    "fault": message.fault,
                    "body": _serialize_body(message.body()),
                }
            )
        )
    return faults


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="CloudLink: message-driven cloud API producer"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument("--config", "-c", help="Path to JSON config file")
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit structured JSON logs"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser(
        "run", help="Replay a JSON file of messages through the bus"
    )
    run_parser.add_argument("file", help="Path to the replay file")

    subparsers.add_parser("endpoints", help="List registered endpoints")

    args = parser.parse_args(argv)

    config = load_config(args.config)

    # Configure logging based on flags, falling back to the configured level
    if args.debug:
        configure_logging(level=logging.DEBUG, json_format=args.json_logs)
    elif args.verbose:
        configure_logging(level=logging.INFO, json_format=args.json_logs)
    else:
        configure_logging(level=config.log_level, json_format=args.json_logs)

    if args.command == "endpoints":
        container = create_container(config)
        for endpoint in container.bus.endpoints:
            print(endpoint)
        return 0

    if args.command == "run":
        try:
            entries = _load_messages(args.file)
        except FileNotFoundError as e:
            print(f"[-] Replay file not found: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"[-] Invalid replay file: {e}", file=sys.stderr)
            if args.debug:
                traceback.print_exc()
            return 1

        container = create_container(config)
        container.bus.subscribe_dead_letter(
            lambda endpoint, message: logging.getLogger("cloudlink.dead_letter").warning(
                "Faulted message on %s: %s", endpoint, message.body()
            )
        )
        faults = _replay(container, entries)
        return 1 if faults else 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
