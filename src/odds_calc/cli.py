"""
odds_calc/cli.py - Command Line Front End

Usage:
    odds-calc std 1.96
    odds-calc rz 100 -p 3
    odds-calc dny 1990 -g female
    odds-calc days-left 1990
    odds-calc ead 1990 --gender MALE

Prints exactly one line on stdout. Domain and validation errors go to
stderr as 'ERROR: ...' with exit code 1.

Author: odds-calc contributors
License: MIT
"""

import argparse
import sys
import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from . import __version__
from .config import LifeExpectancyArgs, ReimannZetaArgs, StdArgs, describe_validation_error
from .formatting import format_percent
from .harmonic import reimann_zeta
from .mortality import days_left, die_next_year_france, expected_age_of_death
from .normal import convert_std

logger = logging.getLogger(__name__)


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# =============================================================================
# HANDLERS: validated args -> output line
# =============================================================================

def run_std(args: StdArgs, today: date) -> str:
    return convert_std(args.to_convert).render()


def run_reimann_zeta(args: ReimannZetaArgs, today: date) -> str:
    return format_percent(reimann_zeta(args.n, args.positions))


def run_die_next_year(args: LifeExpectancyArgs, today: date) -> str:
    return format_percent(die_next_year_france(args.year, args.gender, today))


def run_days_left(args: LifeExpectancyArgs, today: date) -> str:
    return f"{days_left(args.year, args.gender, today)} days"


def run_expected_age(args: LifeExpectancyArgs, today: date) -> str:
    return f"{expected_age_of_death(args.year, args.gender, today):.2f}"


Handler = Callable[[BaseModel, date], str]

COMMANDS: Dict[str, Tuple[Type[BaseModel], Handler]] = {
    'std': (StdArgs, run_std),
    'reimann-zeta': (ReimannZetaArgs, run_reimann_zeta),
    'die-next-year-france': (LifeExpectancyArgs, run_die_next_year),
    'days-left': (LifeExpectancyArgs, run_days_left),
    'expected-age-of-death': (LifeExpectancyArgs, run_expected_age),
}


def _add_life_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument('year', type=int, help='Year of birth')
    sub.add_argument('--gender', '-g', type=str, default='male',
                     help='"male" or "female" (default: male)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='odds-calc',
        description='Small numeric utilities: normal-distribution odds, '
                    'harmonic rarity and French mortality.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Log to stderr (-v info, -vv debug)')

    subparsers = parser.add_subparsers(dest='subcommand', metavar='COMMAND')
    subparsers.required = True

    std = subparsers.add_parser(
        'std', help='std <-> percent converter',
        description='v < 20: std -> percent; v < 100: percent -> std; else 1 in v -> std',
    )
    std.add_argument('to_convert', type=float, help='Value to convert')
    std.set_defaults(command='std')

    rz = subparsers.add_parser(
        'reimann-zeta', aliases=['rz'],
        help='Expected value of 1 out of provided n',
    )
    rz.add_argument('n', type=int, help='n of the range')
    rz.add_argument('--positions', '-p', type=int, default=1, help='Number of positions (default: 1)')
    rz.set_defaults(command='reimann-zeta')

    dny = subparsers.add_parser(
        'die-next-year-france', aliases=['dny'],
        help='Probability of dying within the next year (France)',
    )
    _add_life_args(dny)
    dny.set_defaults(command='die-next-year-france')

    dl = subparsers.add_parser('days-left', help='Expected days of life remaining')
    _add_life_args(dl)
    dl.set_defaults(command='days-left')

    ead = subparsers.add_parser(
        'expected-age-of-death', aliases=['ead'],
        help='Expected age of death',
    )
    _add_life_args(ead)
    ead.set_defaults(command='expected-age-of-death')

    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None, today: Optional[date] = None) -> int:
    """
    Parse argv, run one subcommand and print its result.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        today: Reference date for age calculations

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    model_cls, handler = COMMANDS[args.command]
    fields = {k: v for k, v in vars(args).items() if k not in ('command', 'subcommand', 'verbose')}

    try:
        model = model_cls(**fields)
        output = handler(model, today or date.today())
    except ValueError as e:
        message = describe_validation_error(e)
        logger.debug(f"{args.command} failed: {message}", exc_info=True)
        print(f"ERROR: {message}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
