# batch_cli.py
import argparse
import csv
import json
import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from dotenv import load_dotenv

from tokensafety.config import clamp_concurrency, get_default_concurrency, setup_logging
from tokensafety.core.analyze import analyze_payload

logger = logging.getLogger("BATCH")

FIELDNAMES = [
    "index", "chain_id", "address", "symbol", "is_native", "warning", "severity",
    "blocked", "is_fee_related", "max_fee_pct", "buy_fee_pct", "sell_fee_pct",
    "fee_color", "header_text", "subtitle_text", "error",
]


def load_payloads(path: str) -> list:
    """
    Read a JSON array of payloads, or JSON-lines (one payload per line).
    Blank lines and '#' comments are skipped in JSON-lines files.
    """
    p = Path(path)
    if not p.exists():
        raise ValueError(f"Input file not found: {path}")
    text = p.read_text()
    stripped = text.lstrip()
    if stripped.startswith("["):
        items = json.loads(stripped)
        logger.info("Loaded %d payloads (JSON array) from %s", len(items), path)
        return items

    items = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        try:
            items.append(json.loads(s))
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}:{lineno}: invalid JSON ({e.msg})")
    logger.info("Loaded %d payloads (JSON lines) from %s", len(items), path)
    return items


def _pct(x) -> str:
    return "" if x is None else f"{float(x):.2f}"


def flatten_result(index: int, res: dict) -> dict:
    fees = res.get("fees_percent") or {}
    return {
        "index": index,
        "chain_id": res.get("chain_id"),
        "address": res.get("address") or "",
        "symbol": res.get("symbol") or "",
        "is_native": res.get("is_native"),
        "warning": res.get("warning"),
        "severity": res.get("severity"),
        "blocked": res.get("blocked"),
        "is_fee_related": res.get("is_fee_related"),
        "max_fee_pct": _pct(res.get("fee_percent")),
        "buy_fee_pct": _pct(fees.get("buy")),
        "sell_fee_pct": _pct(fees.get("sell")),
        "fee_color": res.get("fee_color"),
        "header_text": res.get("header_text") or "",
        "subtitle_text": res.get("subtitle_text") or "",
        "error": "",
    }


def error_row(index: int, err: Exception) -> dict:
    row = {k: "" for k in FIELDNAMES}
    row["index"] = index
    row["error"] = str(err)
    return row


def run_batch(payloads: list, concurrency: int = 2) -> tuple[list, list]:
    """Classify every payload; returns (csv rows, json results) in input order."""
    def work(index: int, payload):
        try:
            res = analyze_payload(payload)
            return flatten_result(index, res), res
        except ValueError as e:
            logger.warning("Row %d rejected: %s", index, e)
            return error_row(index, e), {"index": index, "error": str(e)}

    rows = [None] * len(payloads)
    json_out = [None] * len(payloads)
    with ThreadPoolExecutor(max_workers=clamp_concurrency(concurrency)) as ex:
        futs = {ex.submit(work, i, p): i for i, p in enumerate(payloads)}
        for fut in as_completed(futs):
            i = futs[fut]
            rows[i], json_out[i] = fut.result()
            logger.debug("Result %d -> %s %s", i, rows[i]["severity"], rows[i]["error"])
    return rows, json_out


def write_outputs(rows: list, json_out: list, out_csv: str, out_json: str) -> None:
    with open(out_csv, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        w.writerows(rows)
    logger.info("Wrote CSV -> %s", out_csv)

    with open(out_json, "w") as f:
        json.dump(json_out, f, indent=2, default=str)
    logger.info("Wrote JSON -> %s", out_json)


def main(argv=None) -> int:
    load_dotenv()
    setup_logging()

    ap = argparse.ArgumentParser(description="Token safety classifier - batch mode")
    ap.add_argument("--infile", required=True, help="JSON array or JSON-lines file of currency-info payloads")
    ap.add_argument("--out-csv", default="batch_safety.csv", help="CSV output path")
    ap.add_argument("--out-json", default="batch_safety.json", help="JSON output path")
    ap.add_argument("--concurrency", type=int, default=get_default_concurrency(), help="Parallel workers (1-8)")
    args = ap.parse_args(argv)

    try:
        payloads = load_payloads(args.infile)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    rows, json_out = run_batch(payloads, args.concurrency)
    failed = sum(1 for r in rows if r["error"])
    logger.info("Classified %d payloads (%d rejected)", len(rows), failed)

    write_outputs(rows, json_out, args.out_csv, args.out_json)
    print(f"✅ Done. CSV → {args.out_csv}  JSON → {args.out_json}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
