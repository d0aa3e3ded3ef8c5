# primeserve/cli.py
# usage: primeserve is-prime 982451653
#        primeserve range 1 100
#        primeserve serve --port 8082

from __future__ import annotations
import argparse
import json
import logging
import sys
import time
from typing import Any, Dict, List, Optional

from .settings import Settings
from .tools import ToolError, call_tool, list_tools

log = logging.getLogger(__name__)

def _run_tool(name: str, arguments: Dict[str, Any], settings: Settings) -> int:
    t0 = time.perf_counter()
    try:
        result = call_tool(name, arguments, settings)
    except ToolError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    result["ms"] = round((time.perf_counter() - t0) * 1000, 3)
    print(json.dumps(result, ensure_ascii=False))
    return 0

def _serve(args: argparse.Namespace, settings: Settings) -> int:
    from .app import create_app

    host = args.host or settings.host
    port = args.port or settings.port
    log.info("serving on http://%s:%d", host, port)
    create_app(settings).run(host, port, debug=args.debug)
    return 0

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="primeserve", description="Primality, prime search and factorization.")
    sub = ap.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("is-prime", "test N for primality"),
        ("next-prime", "smallest prime greater than N"),
        ("previous-prime", "largest prime less than N"),
        ("factor", "prime factorization of N (N <= 2^53 - 1)"),
    ):
        p = sub.add_parser(command, help=help_text)
        p.add_argument("number", type=int, metavar="N")

    p = sub.add_parser("range", help="all primes in [START, END]")
    p.add_argument("start", type=int)
    p.add_argument("end", type=int)

    sub.add_parser("tools", help="print the tool catalogue")

    p = sub.add_parser("serve", help="run the HTTP API")
    p.add_argument("--host", default=None)
    p.add_argument("--port", type=int, default=None)
    p.add_argument("--debug", action="store_true")
    return ap

_TOOL_FOR_COMMAND = {
    "is-prime": "is_prime",
    "next-prime": "next_prime",
    "previous-prime": "previous_prime",
    "factor": "prime_factorization",
}

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command == "tools":
        print(json.dumps({"tools": list_tools()}, indent=2))
        return 0
    if args.command == "serve":
        return _serve(args, settings)
    if args.command == "range":
        return _run_tool("primes_in_range", {"start": args.start, "end": args.end}, settings)
    return _run_tool(_TOOL_FOR_COMMAND[args.command], {"number": args.number}, settings)

if __name__ == "__main__":
    raise SystemExit(main())
