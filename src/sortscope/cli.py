# src/sortscope/cli.py
from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional

from .analyze import ComparisonResult, compare_sorts
from .generators import GENERATORS, generate
from .notify import notify
from .report import TABLE_HEADERS, step_rows
from .theme import THEMES, save_theme
from .trace import InvalidInput

_NEGATIVE_LEAD = re.compile(r"^-\.?[0-9]")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sortscope",
        description="Trace bubble, insertion and merge sort step by step and compare the runs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  sortscope \"5, 1, 4, 2\" --steps\n"
               "  sortscope --generate reverse --size 6 --html report.html\n",
    )
    p.add_argument("numbers", nargs="?", help="Comma-separated numbers, e.g. \"5,1,4,2\"")
    p.add_argument("--generate", choices=sorted(GENERATORS), help="Generate the input instead of passing numbers")
    p.add_argument("--size", type=int, default=8, help="Generated array size (default: 8)")
    p.add_argument("--seed", type=int, default=None, help="Seed for generated arrays")
    p.add_argument("--html", type=str, help="HTML report output path")
    p.add_argument("--json", type=str, help="JSON output path")
    p.add_argument("--theme", choices=THEMES, help="Report theme; saved as the new default")
    p.add_argument("--steps", action="store_true", help="Print every step record")
    p.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    return p


def _print_summary(result: ComparisonResult, show_steps: bool) -> None:
    print(f"\nInput: {list(result.values)}")
    print("=" * 60)
    for row in result.comparison_rows:
        print(f"{row['icon']} {row['algorithm']:<15} steps={row['steps']:<5} {row['efficiency']:<10} "
              f"{row['time_complexity']:<11} {row['case']}: {row['description']}")
    for rep in result.reports.values():
        print(f"   {rep.name} sorted: {rep.result.sorted_values}")
    if not show_steps:
        return
    for rep in result.reports.values():
        print(f"\n{rep.info.icon} {rep.name}")
        print("   " + " | ".join(TABLE_HEADERS))
        rows = step_rows(rep)
        if not rows:
            print("   No steps recorded")
        for row in rows:
            print(f"   [{row['heading']}] {row['index']} | {row['value']} | {row['compare']} | {row['decision']}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    # argparse takes "-5,1,4" for an option; hand it back as the numbers
    if extras:
        if args.numbers is None and len(extras) == 1 and _NEGATIVE_LEAD.match(extras[0]):
            args.numbers = extras[0]
        else:
            parser.error(f"unrecognized arguments: {' '.join(extras)}")

    try:
        if args.generate:
            values = generate(args.generate, args.size, seed=args.seed)
        elif args.numbers is not None:
            values = args.numbers
        else:
            raise InvalidInput("Please enter numbers to sort.", title="Input Required")

        result = compare_sorts(
            values,
            html_out=args.html,
            json_out=args.json,
            theme=args.theme,
            verbose=not args.quiet,
        )
    except InvalidInput as e:
        notify(e.message, e.title)
        return 2
    except ValueError as e:
        notify(str(e), "Invalid Argument")
        return 2

    if args.theme:
        save_theme(args.theme)
    _print_summary(result, args.steps)
    return 0


if __name__ == "__main__":
    sys.exit(main())
