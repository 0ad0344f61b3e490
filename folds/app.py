import logging
from argparse import ArgumentTypeError
from typing import Callable, List, Optional, Sequence, Union

import pystache
from configargparse import ArgParser
from toolz.dicttoolz import valfilter

from folds.captcha import circular_adjacent_sum, circular_offset_sum, halfway_sum
from folds.general.functional import option
from folds.model import InvalidInput, parse_digits
from folds.reverse import reverse_via_fold


LOGGER_NAME      = 'folds'
ADJACENT         = 'adjacent'
HALFWAY          = 'halfway'
DEFAULT_TEMPLATE = '{{sum}}{{#reversed}} {{reversed}}{{/reversed}}'

Offset = Union[str, int]


def _offset(value: str) -> Offset:
    name = value.strip().lower()
    if name in (ADJACENT, HALFWAY):
        return name
    try:
        return int(name)
    except ValueError:
        raise ArgumentTypeError(f'"{value}" is not one of {ADJACENT}, {HALFWAY} or an integer')


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ArgumentTypeError(f'"{name}" is not a logging level')
    return level


def argument_parser() -> ArgParser:
    parser = ArgParser(
        prog        = 'folds',
        description = 'Sum the digits of a circular captcha that match the digit a fixed distance ahead.'
    )
    parser.add_argument(
        '--digits',
        env_var  = 'CAPTCHA_DIGITS',
        required = True,
        help     = 'The captcha, a string of decimal digits such as 1122'
    )
    parser.add_argument(
        '--offset',
        env_var = 'CAPTCHA_OFFSET',
        default = ADJACENT,
        type    = _offset,
        help    = f'Distance to the compared digit: {ADJACENT}, {HALFWAY} or a non-negative integer'
    )
    parser.add_argument(
        '--reverse',
        env_var = 'CAPTCHA_REVERSE',
        action  = 'store_true',
        help    = 'Also output the digits in reverse order'
    )
    parser.add_argument(
        '--template',
        env_var = 'CAPTCHA_TEMPLATE',
        default = DEFAULT_TEMPLATE,
        help    = 'Mustache template of the output line. Variables: digits, offset, sum, reversed'
    )
    parser.add_argument(
        '--verbosity',
        env_var = 'VERBOSITY',
        default = logging.getLevelName(logging.WARNING),
        type    = _log_level,
        help    = 'Logging verbosity. One of: DEBUG, INFO, WARNING, ERROR, CRITICAL'
    )
    return parser


def captcha(offset: Offset) -> Callable[[List[int]], int]:
    return (
        circular_adjacent_sum                            if offset == ADJACENT else
        halfway_sum                                      if offset == HALFWAY  else
        lambda digits: circular_offset_sum(digits, offset)
    )


def _as_text(digits: List[int]) -> str:
    return ''.join(map(str, digits))


def render(template: str,
           digits: List[int],
           offset: Offset,
           total: int,
           reverse: bool) -> str:
    return pystache.render(
        template,
        valfilter(
            option.not_none,
            {
                'digits'  : _as_text(digits),
                'offset'  : offset,
                'sum'     : total,
                'reversed': option.fmap(lambda ds: _as_text(reverse_via_fold(ds)))(digits if reverse else None)
            }
        )
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = argument_parser().parse_args(argv)

    logging.basicConfig()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(args.verbosity)

    try:
        digits = parse_digits(args.digits)
        logger.debug(f'Captcha of {len(digits)} digits, offset {args.offset}')
        total = captcha(args.offset)(digits)
    except InvalidInput as exc:
        logger.error(f'Captcha "{args.digits}" rejected: {exc}')
        return 2

    logger.debug(f'Captcha sum = {total}')
    print(render(args.template, digits, args.offset, total, args.reverse))
    return 0
