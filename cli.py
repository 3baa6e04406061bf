# cli.py
import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from tokensafety.config import setup_logging
from tokensafety.core.analyze import analyze_payload

logger = logging.getLogger("CLI")

SEVERITY_BADGES = {
    "NONE": "✅",
    "LOW": "ℹ️",
    "MEDIUM": "⚠️",
    "HIGH": "🚨",
    "BLOCKED": "⛔",
}


def load_payload(infile: str | None, inline: str | None):
    """Read the provider JSON from a file, an inline string, or stdin ('-')."""
    if inline is not None:
        logger.debug("Reading inline payload")
        return json.loads(inline)
    if infile == "-":
        logger.debug("Reading payload from stdin")
        return json.load(sys.stdin)
    p = Path(infile)
    if not p.exists():
        raise ValueError(f"Input file not found: {infile}")
    logger.debug("Reading payload from %s", p)
    with p.open() as f:
        return json.load(f)


def print_report(result: dict) -> None:
    badge = SEVERITY_BADGES.get(result["severity"], "?")
    name = result.get("symbol") or result.get("address") or "unknown token"
    print(f"{badge} {name}  chain={result.get('chain_id', '?')}  native={result['is_native']}")
    print(f"🔹 Warning: {result['warning']}")
    print(f"🔹 Severity: {result['severity']}")

    if not result["has_safety_info"]:
        print("ℹ️ No safety info supplied; treated as a non-default token.")

    fee = result.get("fee_percent")
    if fee is None:
        print("✅ No fee data.")
    else:
        fees = result["fees_percent"]
        print(f"💸 Fees: buy≈{fees['buy']:.2f}%  sell≈{fees['sell']:.2f}%  (color {result['fee_color']})")

    rendered = result.get("rendered") or {}
    if rendered.get("header"):
        print(f"📰 {rendered['header']}")
    if rendered.get("subtitle"):
        print(f"📝 {rendered['subtitle']}")

    if result["blocked"]:
        print("⛔ Swaps with this token should be blocked.")


def main(argv=None) -> int:
    load_dotenv()
    setup_logging()

    p = argparse.ArgumentParser(description="Token safety classifier CLI")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--infile", help="Path to a currency-info JSON file ('-' for stdin)")
    src.add_argument("--payload", help="Currency-info JSON passed inline")
    p.add_argument("--json", action="store_true", help="Print JSON only")
    args = p.parse_args(argv)
    logger.debug("Args -> infile=%s inline=%s json=%s", args.infile, args.payload is not None, args.json)

    try:
        payload = load_payload(args.infile, args.payload)
        result = analyze_payload(payload)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON: %s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid payload: %s", e)
        return 1

    if args.json:
        print(json.dumps(result, indent=2, sort_keys=False, default=str))
        return 0

    print_report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
