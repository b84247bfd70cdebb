#!/usr/bin/env python3
"""
Vault version tool: CLI wrapper around vaultkv_core.

Parsing and ordering logic lives in vaultkv_core.version.

Usage:
  python scripts/vault_version.py parse 2.0.0.RELEASE
  python scripts/vault_version.py compare 1.0 1.0.1
  python scripts/vault_version.py backend 0.9.6
  VAULT_SERVER_VERSION=1.4.2 python scripts/vault_version.py backend
  # exit code 0: ok, 1: invalid version, 2: usage error

Environment:
  VAULT_SERVER_VERSION: default server version for "backend"
  VAULTKV_LOG_LEVEL: logging level (default: WARNING)
"""

import argparse
import logging
import os
import sys

# Allow running from a source checkout without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'core'))

from vaultkv_core import KeyValueBackend, compare, parse

logger = logging.getLogger("vault_version")

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def cmd_parse(args):
    version = parse(args.text)
    print(f"{version}  (major={version.major}, minor={version.minor}, "
          f"bugfix={version.bugfix}, build={version.build})")
    return 0


def cmd_compare(args):
    left = parse(args.left)
    right = parse(args.right)
    print(f"{left} {_SYMBOLS[compare(left, right)]} {right}")
    return 0


def cmd_backend(args):
    text = args.server_version or os.environ.get("VAULT_SERVER_VERSION", "").strip()
    if not text:
        print("Error: give a server version or set VAULT_SERVER_VERSION",
              file=sys.stderr)
        return 2
    backend = KeyValueBackend.for_server_version(text)
    print(f"Vault {parse(text)}: {backend.name} "
          f"(requires >= {backend.minimum_server_version})")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Parse, compare and inspect Vault server versions")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Show the canonical form of a version")
    p.add_argument("text", help="Version string, e.g. 2.0.0.RELEASE")
    p.set_defaults(func=cmd_parse)

    p = sub.add_parser("compare", help="Order two versions")
    p.add_argument("left")
    p.add_argument("right")
    p.set_defaults(func=cmd_compare)

    p = sub.add_parser("backend",
                       help="Pick the key-value backend for a server version")
    p.add_argument("server_version", nargs="?", default=None,
                   help="Server version (default: $VAULT_SERVER_VERSION)")
    p.set_defaults(func=cmd_backend)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = os.environ.get("VAULTKV_LOG_LEVEL", "WARNING").strip().upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except ValueError as e:
        logger.debug("Rejected input", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
