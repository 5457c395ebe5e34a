from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import Settings
from .client import AlchemyNftClient
from .owners import get_entries_by_owner
from .pool import build_pool, render_pool, tally_pool_file, write_pool

from .project_constants import (
    CONTRACT_ADDRESS,
    TOKEN_ID,
    POOL_FILE,
)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def cmd_build(args: argparse.Namespace) -> int:
    settings = Settings.from_env(
        api_key_override=args.api_key, network_override=args.network
    )
    log = logging.getLogger("build")

    client = AlchemyNftClient(settings, timeout_s=args.timeout)
    try:
        log.info("Fetching owners of %s on %s...", args.contract, settings.network)
        entries_by_owner = get_entries_by_owner(client, args.contract, args.token_id)
    finally:
        client.close()

    log.info("Owners of token %d : %d", args.token_id, len(entries_by_owner))

    pool = build_pool(entries_by_owner)
    log.info("Pool entries      : %d", len(pool))

    # Only reached once aggregation has fully succeeded.
    write_pool(args.out, render_pool(pool))

    # Spot check
    print(entries_by_owner)
    print(f"🧾 Wrote pool: {args.out}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    counts = tally_pool_file(args.pool)
    print("--- POOL CHECK ---")
    for owner, count in counts.items():
        print(f"{owner} : {count}")
    print("-" * 18)
    print(f"Owners        : {len(counts)}")
    print(f"Total entries : {sum(counts.values())}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="raffle-pool",
        description="Build a raffle pool from the holders of one NFT token id.",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    p.add_argument("--api-key", default=None, help="Override Alchemy API key (else use env).")
    p.add_argument("--network", default=None, help="Alchemy network, e.g. eth-mainnet.")
    p.add_argument("--timeout", type=float, default=60.0, help="HTTP timeout seconds.")

    sub = p.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("build", help="Fetch holders and write the pool file.")
    b.add_argument("--contract", default=CONTRACT_ADDRESS, help="NFT contract address.")
    b.add_argument("--token-id", type=int, default=TOKEN_ID, help="Token id to count.")
    b.add_argument("--out", default=POOL_FILE, help="Pool output path.")
    b.set_defaults(func=cmd_build)

    c = sub.add_parser("check", help="Tally an existing pool file per owner.")
    c.add_argument("--pool", default=POOL_FILE, help="Path to a pool file.")
    c.set_defaults(func=cmd_check)

    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        code = args.func(args)
    except Exception as e:
        logging.getLogger(args.cmd).error("%s", e, exc_info=args.verbose)
        code = 1
    raise SystemExit(code)
