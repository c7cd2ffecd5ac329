#!/usr/bin/env python3
"""Interactive console for a local devinfo registry.

Reads host commands from stdin, one per line:

    update {"name": "pi-1", "onboard": true, "temperature": 48.2}
    refresh all
    status
    show

and prints the acknowledgement plus every outbound command the plugin
enqueued.  With ``--mqtt`` the registry is also fed from the broker
configured through ``DEVINFO_MQTT_*`` and publish commands are sent
there instead of printed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pydevinfo import DevinfoConfig, DevinfoError, DevinfoMqttBridge, DevinfoPlugin, QueueChannel  # noqa: E402
from pydevinfo._crypto import build_codec  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive a devinfo registry from stdin.")
    parser.add_argument(
        "--mqtt",
        action="store_true",
        help="Subscribe to the update topic and publish refresh requests.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Render the status report without ANSI colours.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logs.",
    )
    return parser.parse_args()


def _print_commands(commands: list[str]) -> None:
    for command in commands:
        print(f"[devinfo] -> {command}")


def _main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides = {"color_enabled": False} if args.no_color else {}
    try:
        config = DevinfoConfig.from_env(**overrides)
        codec = build_codec(config)
    except DevinfoError as exc:
        print(f"[devinfo] Invalid configuration: {exc}", file=sys.stderr)
        return 2

    channel = QueueChannel()
    plugin = DevinfoPlugin(channel=channel, config=config, codec=codec)
    bridge: DevinfoMqttBridge | None = None
    if args.mqtt:
        bridge = DevinfoMqttBridge(plugin, config=config, codec=codec)
        bridge.start()

    try:
        for line in sys.stdin:
            text = line.strip()
            if not text:
                continue
            verb, _, rest = text.partition(" ")
            if verb == "status":
                print(plugin.status(), end="")
                continue
            if verb == "show":
                print(plugin.show())
                continue
            try:
                print(f"[devinfo] {plugin.action(verb, rest.strip())}")
            except DevinfoError as exc:
                print(f"[devinfo] {verb} failed: {exc}", file=sys.stderr)
                continue
            if bridge is not None:
                _print_commands(bridge.forward_pending(channel))
            else:
                _print_commands(channel.drain())
    except KeyboardInterrupt:
        pass
    finally:
        if bridge is not None:
            bridge.stop()
        plugin.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
