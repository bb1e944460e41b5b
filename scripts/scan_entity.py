#!/usr/bin/env python3
"""
Scan company websites for AI hallucinations.

Fetches each website, asks the language model about the company, and prints
the comparison payload as JSON (one object per URL, in input order).

Example:
    python scripts/scan_entity.py https://acme.com
    python scripts/scan_entity.py https://acme.com https://globex.com --execute
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from tqdm import tqdm

from entity_scanner.cli import add_execute_argument, setup_logging
from entity_scanner.pipeline import ScanPipeline

load_dotenv(Path(__file__).parent.parent / ".env")


def scan_urls(pipeline: ScanPipeline, urls: list[str]) -> list[dict]:
    """
    Scan URLs one after another.

    Args:
        pipeline: Pipeline to run each scan with
        urls: URLs to scan

    Returns:
        Result payloads in input order
    """
    results = []
    for url in tqdm(urls, desc="Scanning", unit="site", disable=len(urls) < 2):
        results.append(pipeline.run(url).to_dict())
    return results


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare what a language model says about a company with its website"
    )
    parser.add_argument("urls", nargs="+", help="Website URL(s) to scan")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    add_execute_argument(parser)
    args = parser.parse_args(argv)

    logger = setup_logging("scan_entity", execute=args.execute)

    try:
        pipeline = ScanPipeline()
    except ValueError as e:
        # Missing credential is fatal at startup
        logger.error(f"Configuration error: {e}")
        return 2

    results = scan_urls(pipeline, args.urls)
    for result in results:
        print(json.dumps(result, indent=args.indent))

    failures = sum(1 for result in results if "error" in result)
    if failures:
        logger.info(f"{failures}/{len(results)} scan(s) failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
