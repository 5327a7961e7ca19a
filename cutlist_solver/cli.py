# cutlist_solver/cli.py
# Command line entrypoint:
# - JSON job input (--job) or CSV stock/cut lists (--stocks/--cuts)
# - built-in example (--example)
# - optional JSON export of the result and PNG preview
#
# Run:
#   python -m cutlist_solver --job job.json
#   python -m cutlist_solver --stocks stocks.csv --cuts cuts.csv --kerf 1/8 --algorithm guillotine
#   python -m cutlist_solver --example --png layout.png

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .config import DEFAULTS, KERF_PRESETS, MATERIALS, STOCK_PRESETS, parse_kerf_text
from .debug import print_result
from .io_csv import read_cuts_csv, read_stocks_csv
from .io_json import load_job_json
from .logger import set_enabled, set_verbose
from .run import ALGORITHMS, run_best
from .sample_data import example_cuts, example_stocks
from .utils import save_result_json


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Sheet goods cut-list optimizer (guillotine / shelf / branch-and-bound)")
    p.add_argument("--job", type=str, default="", help="Path to job JSON (stocks/cuts/settings)")
    p.add_argument("--stocks", type=str, default="", help="Path to stocks CSV")
    p.add_argument("--cuts", type=str, default="", help="Path to cuts CSV")
    p.add_argument("--example", action="store_true", help="Use built-in example stocks and cuts")
    p.add_argument("--kerf", type=str, default="", help='Saw kerf in inches, e.g. 0.125 or 1/8 (default: job file or 1/8")')
    p.add_argument("--algorithm", type=str, default="best", choices=sorted(ALGORITHMS), help="Optimizer to run")
    p.add_argument("--json-out", dest="json_out", type=str, default="", help="Write result JSON to this path")
    p.add_argument("--png", type=str, default="", help="Save layout preview as PNG (optional)")
    p.add_argument("--plot", action="store_true", help="Show matplotlib preview window")
    p.add_argument("--quiet", action="store_true", help="Only print the summary line")
    p.add_argument("--verbose", action="store_true", help="Log optimizer decisions")
    p.add_argument("--list-presets", dest="list_presets", action="store_true", help="Print stock, kerf and material presets and exit")
    return p


def print_presets() -> None:
    print("Stock presets:")
    for name, length, width in STOCK_PRESETS:
        print(f"  {name:20s} {width:g}x{length:g}")
    print("Kerf presets:")
    for value, label in KERF_PRESETS:
        print(f"  {label:8s} {value:g}")
    print("Materials: " + ", ".join(MATERIALS))


def main(argv: Optional[List[str]] = None) -> None:
    args = build_argparser().parse_args(argv)

    if args.list_presets:
        print_presets()
        return

    set_enabled(bool(args.verbose))
    set_verbose(bool(args.verbose))

    kerf: Optional[float] = parse_kerf_text(args.kerf) if args.kerf.strip() else None

    if args.example:
        stocks, cuts = example_stocks(), example_cuts()
    elif args.job:
        job_path = Path(args.job)
        if not job_path.exists():
            raise SystemExit(f"Job JSON not found: {job_path}")
        loaded = load_job_json(job_path, kerf=kerf)
        stocks, cuts, kerf = loaded.stocks, loaded.cuts, loaded.kerf
    elif args.stocks and args.cuts:
        for path in (Path(args.stocks), Path(args.cuts)):
            if not path.exists():
                raise SystemExit(f"CSV not found: {path}")
        stocks = read_stocks_csv(args.stocks)
        cuts = read_cuts_csv(args.cuts)
    else:
        raise SystemExit("Provide --job job.json, --stocks s.csv --cuts c.csv, or --example")

    if not cuts:
        raise SystemExit("No cuts found in input.")
    if kerf is None:
        kerf = DEFAULTS.default_kerf

    res, _ = run_best(stocks, cuts, kerf, algorithm=args.algorithm, validate=True)
    result, stats = res.result, res.stats

    if not args.quiet:
        print_result(result)
    print(
        f"{result.algorithm}: {stats.sheets} sheets, {stats.waste}% waste, "
        f"{stats.unplaced} unplaced ({res.seconds:.2f} s)"
    )

    if args.json_out.strip():
        save_result_json(result, args.json_out.strip())
        print(f"Result JSON written to: {args.json_out.strip()}")

    if result.sheets and (args.png.strip() or args.plot):
        from .plotting import save_result_png, show_result

        if args.png.strip():
            save_result_png(result, args.png.strip())
            print(f"Layout preview saved to: {args.png.strip()}")
        if args.plot:
            show_result(result)


if __name__ == "__main__":
    main()
