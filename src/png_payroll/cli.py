"""Payroll Command Line Interface.

Provides offline tools for:
- Salary and wages tax calculation
- Tax table review
- Shift working hours

Usage:
    python -m png_payroll.cli calculate 50000
    python -m png_payroll.cli calculate 50000 --brackets table.json --derive-base-tax
    python -m png_payroll.cli brackets --tax-year 2025
    python -m png_payroll.cli hours 08:00 16:30 --break 30
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable

from png_payroll.calculators import (
    BaseTaxMode,
    PayrollError,
    TaxBracket,
    calculate_working_hours,
    compute_tax,
    example_tax,
    validate_bracket_table,
)
from png_payroll.calculators.tables import BUILTIN_TABLES, load_brackets_file
from png_payroll.config import get_settings
from png_payroll.formatting import format_kina, format_percent

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


class PayrollCli:
    """Payroll Command Line Interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m png_payroll.cli",
            description="PNG salary and wages tax tools",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            default=None,
            help="Logging level (default: $LOG_LEVEL or INFO)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # calculate command
        calculate = subparsers.add_parser(
            "calculate",
            help="Calculate tax on an annual income",
        )
        calculate.add_argument(
            "income",
            type=str,
            help="Annual gross income in Kina",
        )
        self._add_table_arguments(calculate)
        calculate.add_argument(
            "--derive-base-tax",
            action="store_true",
            help="Recompute each bracket's base tax from the lower brackets",
        )
        calculate.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON",
        )

        # brackets command
        brackets = subparsers.add_parser(
            "brackets",
            help="Show a tax table with example tax and consistency issues",
        )
        self._add_table_arguments(brackets)

        # hours command
        hours = subparsers.add_parser(
            "hours",
            help="Working hours for a shift",
        )
        hours.add_argument("start", type=str, help="Start time (HH:MM)")
        hours.add_argument("end", type=str, help="End time (HH:MM)")
        hours.add_argument(
            "--break",
            dest="break_minutes",
            type=int,
            default=0,
            help="Unpaid break in minutes (default: 0)",
        )

        return parser

    @staticmethod
    def _add_table_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--brackets",
            type=str,
            metavar="FILE",
            help="JSON file with bracket rows (default: built-in table)",
        )
        parser.add_argument(
            "--tax-year",
            type=int,
            default=None,
            help="Built-in table year (default: $CURRENT_TAX_YEAR)",
        )

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        logging.basicConfig(
            level=(parsed.log_level or get_settings().log_level).upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        if not parsed.command:
            self.parser.print_help()
            return EXIT_ERROR

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "brackets": self._cmd_brackets,
            "hours": self._cmd_hours,
        }

        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return EXIT_ERROR

        try:
            return handler(parsed)
        except PayrollError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return EXIT_INVALID

    def _load_table(self, args: argparse.Namespace) -> list[TaxBracket]:
        if args.brackets:
            logger.debug("Loading brackets from %s", args.brackets)
            return load_brackets_file(args.brackets)
        year = args.tax_year or get_settings().current_tax_year
        return list(BUILTIN_TABLES.get(year, ()))

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate tax on an annual income."""
        mode = BaseTaxMode.DERIVED if args.derive_base_tax else get_settings().base_tax_mode
        result = compute_tax(args.income, self._load_table(args), base_tax_mode=mode)

        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
            return EXIT_OK

        print(f"Annual income:     {format_kina(result.annual_income)}")
        print(f"Tax bracket:       {result.tax_bracket}")
        print(f"Annual tax:        {format_kina(result.annual_tax)}")
        print(f"Effective rate:    {format_percent(result.effective_rate)}")
        print(f"Net annual:        {format_kina(result.net_annual)}")
        print(f"Monthly tax:       {format_kina(result.monthly_tax)}")
        print(f"Fortnightly tax:   {format_kina(result.fortnightly_tax)}")
        print(f"Net monthly:       {format_kina(result.net_monthly)}")
        print(f"Net fortnightly:   {format_kina(result.net_fortnightly)}")
        return EXIT_OK

    def _cmd_brackets(self, args: argparse.Namespace) -> int:
        """Print a tax table."""
        table = sorted(self._load_table(args), key=lambda b: b.min_income)

        print(f"{'Bracket':<8}{'Income range':<32}{'Rate':>9}{'Base tax':>15}{'Example tax':>30}")
        for bracket in table:
            upper = "No limit" if bracket.is_unbounded else format_kina(bracket.max_income, 0)
            income, tax = example_tax(bracket)
            print(
                f"{bracket.bracket_number:<8}"
                f"{format_kina(bracket.min_income, 0) + ' to ' + upper:<32}"
                f"{format_percent(bracket.tax_rate):>9}"
                f"{format_kina(bracket.base_tax):>15}"
                f"{format_kina(income) + ' = ' + format_kina(tax):>30}"
            )

        issues = validate_bracket_table(table)
        if issues:
            print(f"\n{len(issues)} issue(s) found:")
            for issue in issues:
                print(f"  - {issue}")
            return EXIT_INVALID
        return EXIT_OK

    def _cmd_hours(self, args: argparse.Namespace) -> int:
        """Print a shift's working hours."""
        hours = calculate_working_hours(args.start, args.end, args.break_minutes)
        print(f"Working hours: {hours}")
        return EXIT_OK


def main() -> int:
    """CLI entry point."""
    cli = PayrollCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
