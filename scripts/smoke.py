# scripts/smoke.py
"""
Smoke Test Script for the Numscript grammar.

Usage
-----
1. Test with the default hardcoded program:
    $ uv run python scripts/smoke.py

2. Test with a local file:
    $ uv run python scripts/smoke.py --file payout.num
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import tree_sitter_numscript
from dotenv import load_dotenv
from tree_sitter import Language, Parser

from numscript_syntax.diagnostics import check_source

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_PROGRAM = """
vars {
  monetary $amount
  account $merchant
}

// split a payment between the merchant and the platform fee account
send $amount (
  source = @users:1234 allowing overdraft up to [USD/2 500]
  destination = {
    95% to $merchant
    remaining to @platform:fees
  }
)
"""


def main() -> None:
    """Load the grammar, parse a program and report what came out."""
    parser = argparse.ArgumentParser(description="Run the Numscript grammar smoke test")
    parser.add_argument("--file", "-f", type=str, help="Path to a Numscript source file")
    args = parser.parse_args()

    # 1. Load Phase
    try:
        handle = Language(tree_sitter_numscript.language())
    except (TypeError, ValueError) as exc:
        print(f"\n❌ Error loading Numscript grammar: {exc}")
        sys.exit(1)
    print(f"✅ Loaded numscript grammar (ABI {handle.abi_version}, {handle.node_kind_count} node kinds)")

    # 2. Input Phase
    source: str | bytes
    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}")
            sys.exit(1)
        print(f"\n📂 Using input file: {input_path}")
        source = input_path.read_bytes()
    else:
        print("\n📝 Using default program (No --file provided)")
        source = DEFAULT_PROGRAM

    # 3. Parse Phase
    started = time.perf_counter()
    result = check_source(source, Parser(handle))
    elapsed = (time.perf_counter() - started) * 1000

    print("\n" + "=" * 60)
    if result.is_ok():
        tree = result.unwrap()
        print(f"✅ Parsed without errors in {elapsed:.2f}ms")
        print("=" * 60)
        print(f"\n🌳 {tree.root_node}")
        return

    print(f"⚠️  Syntax errors found in {elapsed:.2f}ms")
    print("=" * 60)
    for issue in result.unwrap_err():
        print(f"  {issue.start.row + 1}:{issue.start.column + 1}  {issue.kind:<8} {issue.message}")
    sys.exit(1)


if __name__ == "__main__":
    main()
