#!/usr/bin/env python3
"""
Walk through the complete issuance flow against an in-memory collection.

Demonstrates:
1. Administrator reservation rejected by the supply cap
2. Sale phase toggling
3. Public mint with exact payment
4. Each rejection kind (inactive sale, batch limit, wrong payment, supply cap)
5. Treasury withdrawal
6. Optionally persisting the collection record to Supabase
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.errors import CollectionError
from services.collection import Collection
from services.config import CollectionConfig

ADMIN = "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4"
BUYER = "0xAb8483F64d9C6d1EcF9b849Ae677dD3315835cb2"


def print_section(title: str) -> None:
    """Print a section header."""
    print()
    print("=" * 80)
    print(title)
    print("=" * 80)


def attempt(label: str, action) -> None:
    try:
        result = action()
        print(f"   [OK]   {label}: {result}")
    except CollectionError as e:
        print(f"   [FAIL] {label}: {e.code} - {e}")


def run_demo(collection: Collection) -> None:
    price = collection.unit_price

    print_section("1. Reservation")
    attempt("reserve_for_admin", lambda: collection.reserve_for_admin(ADMIN))
    print(f"   issued_count = {collection.issued_count}")

    print_section("2. Sale phase")
    attempt("mint while inactive", lambda: collection.mint(BUYER, 5, price * 5))
    attempt("buyer flips sale", lambda: collection.flip_sale_state(BUYER))
    attempt("admin flips sale", lambda: collection.flip_sale_state(ADMIN))

    print_section("3. Public mint")
    attempt("mint 19", lambda: collection.mint(BUYER, 19, price * 19).item_ids)
    attempt("mint 19 again", lambda: collection.mint(BUYER, 19, price * 19))
    attempt("mint 5 without payment", lambda: collection.mint(BUYER, 5, 0))
    attempt("mint 25", lambda: collection.mint(BUYER, 25, price * 25))
    print(f"   issued_count = {collection.issued_count} / {collection.max_supply}")
    print(f"   buyer holds {collection.count_of(BUYER)} item(s)")

    print_section("4. Withdrawal")
    print(f"   treasury = {collection.treasury_balance} {collection.currency}")
    attempt("buyer withdraws", lambda: collection.withdraw(BUYER))
    attempt("admin withdraws", lambda: collection.withdraw(ADMIN))
    attempt("admin withdraws again", lambda: collection.withdraw(ADMIN))
    print(f"   treasury = {collection.treasury_balance} {collection.currency}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run the reference mint scenario against an in-memory collection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the scenario with the reference configuration
  python run_mint_demo.py

  # Use a larger cap and save the resulting record to Supabase
  python run_mint_demo.py --max-supply 100 --persist
        """
    )
    parser.add_argument("--max-supply", type=int, default=25, help="Supply cap (default: 25)")
    parser.add_argument("--base-uri", default="xyz", help="Content locator prefix (default: xyz)")
    parser.add_argument(
        "--persist",
        action="store_true",
        help="Save the final collection record to Supabase (requires SUPABASE_URL/SUPABASE_KEY)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show service logs")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    collection = Collection(
        CollectionConfig(admin=ADMIN, max_supply=args.max_supply, base_uri=args.base_uri)
    )
    run_demo(collection)

    if args.persist:
        from repositories.collection_state_repository import save_snapshot

        print_section("5. Persist")
        save_snapshot(collection.snapshot())
        print(f"   saved record for {collection.symbol}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
