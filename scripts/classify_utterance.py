#!/usr/bin/env python3
"""
Classify a single utterance from the command line.

Usage:
    python scripts/classify_utterance.py "take me to the analytics page"
    python scripts/classify_utterance.py --offline "how do I reach support"
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from routing.errors import InputError  # noqa: E402
from routing.navigation import NavigationPolicy  # noqa: E402
from routing.resolver import IntentResolutionService, get_resolver  # noqa: E402


async def classify(text: str, offline: bool) -> int:
    resolver = IntentResolutionService() if offline else get_resolver()

    try:
        result = await resolver.resolve(text)
    except InputError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    decision = NavigationPolicy().decide(result)

    print(json.dumps(result.to_dict(), indent=2))
    print()
    if decision.auto_navigate:
        print(f"➡️  Would navigate to {decision.route} in {decision.delay_seconds:.0f}s")
    else:
        print(f"❓ Would ask before navigating to {decision.route}")
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Route a natural-language request to a page.")
    parser.add_argument("text", help="Request, e.g. 'show me the dashboard'")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip Gemini and use keyword matching only.",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    sys.exit(asyncio.run(classify(args.text, args.offline)))
