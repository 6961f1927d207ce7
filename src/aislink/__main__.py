"""AISLINK CLI entry point.

Usage:
    python -m aislink decode                      # Sentences on stdin, JSON lines on stdout
    python -m aislink decode capture.nmea         # Sentences from a file
    python -m aislink relay                       # TCP relay on the configured port
    python -m aislink relay --port 10110          # Override the relay port
    python -m aislink --config custom.yaml relay  # Custom config
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Iterable, TextIO

from aislink.codec.gateway import AisGateway
from aislink.core.config import AislinkConfig
from aislink.relay.server import AisRelay
from aislink.utils.logging import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aislink",
        description="AISLINK - AIS six-bit message codec and relay",
    )
    parser.add_argument(
        "--config",
        "-c",
        default="config/default.yaml",
        help="Path to configuration YAML file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        default=False,
        help="Validate config against Pydantic schema before starting",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (default: no file logging)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Output logs as JSON instead of human-readable",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Decode VDM/VDO sentences to JSON lines")
    decode.add_argument("file", nargs="?", default=None, help="Input file (default: stdin)")
    decode.add_argument(
        "--no-validate",
        action="store_true",
        default=False,
        help="Emit records that fail field range validation",
    )

    relay = sub.add_parser("relay", help="Run the TCP sentence relay")
    relay.add_argument("--host", default=None, help="Override listen address")
    relay.add_argument("--port", type=int, default=None, help="Override listen port")
    relay.add_argument("--max-clients", type=int, default=None, help="Override client ceiling")
    return parser


def run_decode(gateway: AisGateway, lines: Iterable[str], out: TextIO | None = None) -> int:
    """Write one JSON object per decoded sentence; returns the count."""
    out = out or sys.stdout
    count = 0
    for line in lines:
        if not line.strip():
            continue
        msg = gateway.process_line(line)
        if msg is None:
            continue
        out.write(json.dumps(msg.to_dict()) + "\n")
        count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = AislinkConfig(args.config)
    try:
        cfg = config.load(validate=args.validate_config)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: Config validation failed:\n{e}", file=sys.stderr)
        return 1

    if args.command == "decode" and args.no_validate:
        config.override("aislink.codec.validate_inbound", False)
    if args.command == "relay":
        if args.host is not None:
            config.override("aislink.relay.host", args.host)
        if args.port is not None:
            config.override("aislink.relay.port", args.port)
        if args.max_clients is not None:
            config.override("aislink.relay.max_clients", args.max_clients)

    system = cfg.aislink.get("system", {})
    log_level = args.log_level or system.get("log_level", "INFO")
    log_file = args.log_file or system.get("log_file", None)
    log_json = args.log_json or system.get("log_json", False)
    setup_logging(log_level, log_file=log_file, log_json=log_json)
    log = get_logger("aislink.cli")

    if args.command == "decode":
        gateway = AisGateway.from_config(cfg.aislink.get("codec"))
        if args.file is None:
            count = run_decode(gateway, sys.stdin)
        else:
            with open(args.file, encoding="ascii", errors="replace") as fh:
                count = run_decode(gateway, fh)
        log.info("decode finished", decoded=count, **gateway.get_stats())
        return 0

    relay = AisRelay.from_config(cfg.aislink)
    if relay is None:
        log.warning("relay disabled in configuration")
        return 1
    try:
        asyncio.run(relay.serve_forever())
    except KeyboardInterrupt:
        log.info("relay interrupted", **relay.get_stats())
    return 0


if __name__ == "__main__":
    sys.exit(main())
