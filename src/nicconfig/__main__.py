import argparse
import json
import logging
import sys

from nicconfig.config import get_settings
from nicconfig.controller.handlers import (
    apply_adapter_ipv4_config,
    get_current_config,
    get_network_adapters,
)
from nicconfig.errors import InvalidSettings
from nicconfig.model.gateway import PowerShellGateway


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nicconfig", description="Inspect and set adapter IPv4 settings.")
    parser.add_argument("--json", action="store_true", help="print the raw response as JSON")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging (-vv for debug)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="list network adapters")

    show = sub.add_parser("show", help="show an adapter's IPv4 configuration")
    show.add_argument("adapter")

    apply = sub.add_parser("apply", help="apply a static IPv4 configuration (requires Administrator)")
    apply.add_argument("adapter")
    apply.add_argument("--address", required=True)
    apply.add_argument("--mask", required=True)
    apply.add_argument("--gateway", default="")
    apply.add_argument("--dns1", default="")
    apply.add_argument("--dns2", default="")
    return parser


def _render(command: str, response: dict) -> str:
    if not response["success"]:
        return f"Error: {response['error']['message']}"

    data = response["data"]
    if command == "list":
        return "\n".join(f"{a['id']}\t{a['display_label']}" for a in data) or "No adapters found."
    if command == "show":
        labels = (
            ("Adapter", "adapter"),
            ("IP address", "address"),
            ("Subnet mask", "mask"),
            ("Gateway", "gateway"),
            ("DNS 1", "dns1"),
            ("DNS 2", "dns2"),
        )
        return "\n".join(f"{label:<12} {data[key] or '-'}" for label, key in labels)
    return f"{data['message']} ({', '.join(data['steps'])})"


def main(argv=None) -> int:
    # Adapter names may not fit the console code page.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except InvalidSettings as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.code

    level = {0: settings.log_level, 1: "INFO"}.get(args.verbose, "DEBUG")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    gateway = PowerShellGateway.from_settings(settings)
    if args.command == "list":
        response = get_network_adapters(gateway)
    elif args.command == "show":
        response = get_current_config(args.adapter, gateway)
    else:
        response = apply_adapter_ipv4_config(
            {
                "adapter": args.adapter,
                "address": args.address,
                "mask": args.mask,
                "gateway": args.gateway,
                "dns1": args.dns1,
                "dns2": args.dns2,
            },
            gateway,
        )

    if args.json:
        print(json.dumps(response, indent=2, ensure_ascii=False))
    else:
        out = sys.stdout if response["success"] else sys.stderr
        print(_render(args.command, response), file=out)

    return 0 if response["success"] else response["error"]["code"]


if __name__ == "__main__":
    sys.exit(main())
