"""Bagkit CLI entry points.

This module exposes data bag commands for list, show, create and delete.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from typing import Any, Sequence

from core.config import BagkitConfig, parse_data_bag_paths
from core.types import Mode
from databag.client import DataBagClient
from databag.data_bag import DataBag


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="bagkit", description="Bagkit data bag CLI")
    parser.add_argument("--config", help="YAML config file layered over BAGKIT_* env vars")
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--solo",
        action="store_true",
        help="Resolve data bags from local data bag paths",
    )
    mode_group.add_argument("--server-url", help="Override BAGKIT_SERVER_URL and use server mode")
    parser.add_argument(
        "--data-bag-path",
        action="append",
        help="Local data bag root; repeat for several roots, later roots win",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Skip mutating server requests",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    list_parser = subparsers.add_parser("list", help="List data bag names")
    list_parser.add_argument("--inflate", action="store_true", help="Include each bag's items")
    show_parser = subparsers.add_parser("show", help="Show the items of a data bag")
    show_parser.add_argument("name", help="Data bag name")
    create_parser = subparsers.add_parser("create", help="Create a data bag on the server")
    create_parser.add_argument("name", help="Data bag name")
    delete_parser = subparsers.add_parser("delete", help="Delete a data bag from the server")
    delete_parser.add_argument("name", help="Data bag name")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Bagkit CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = DataBagClient(build_config(args))
    if args.command == "list":
        _print_json(client.list(inflate=args.inflate))
        return 0
    if args.command == "show":
        _print_json(client.load(args.name))
        return 0
    if args.command == "create":
        client.save(DataBag(args.name))
        print(args.name)
        return 0
    if args.command == "delete":
        client.destroy(args.name)
        print(args.name)
        return 0
    parser.error(f"Unsupported command: {args.command}")
    return 2


def build_config(args: argparse.Namespace) -> BagkitConfig:
    """Build runtime config with command-line overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Config from env or file with flag overrides applied.
    """
    config = BagkitConfig.from_file(args.config) if args.config else BagkitConfig.from_env()
    if args.solo:
        config = replace(config, mode=Mode.SOLO)
    if args.server_url:
        config = replace(config, mode=Mode.SERVER, server_url=args.server_url)
    if args.data_bag_path:
        config = replace(config, data_bag_paths=parse_data_bag_paths(args.data_bag_path))
    if args.dry_run:
        config = replace(config, dry_run=True)
    return config


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))
