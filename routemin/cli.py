"""Command-line option parsing for the route minimization solver."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT64_MAX = 2**64 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


class LogLevel(enum.IntEnum):
    """How much the solver reports while running."""

    NOT_SET = -1
    NONE = 0
    NORMAL = 1
    VERBOSE = 2


_LOG_LEVEL_NAMES = {
    "none": LogLevel.NONE,
    "normal": LogLevel.NORMAL,
    "verbose": LogLevel.VERBOSE,
}


class CliError(Exception):
    """Raised when the command line cannot be understood."""


@dataclass
class CliOptions:
    """Options gathered from the command line."""

    problem_file: str
    solution_file: str
    initial_solution_file: str | None = None
    log_incumbent_solutions: bool = False
    beta_correction: bool = False
    log_level: LogLevel = LogLevel.VERBOSE
    n_near: int = 100
    k_max: int = 5
    t_max: int = 365 * 86400 * 100
    t_max_ms: int = -1
    has_t_max_ms: bool = False
    i_rand: int = 1000
    lower_bound: int = 0
    has_seed: bool = False
    seed: int = 0


def usage(prog: str) -> str:
    """Return the usage text for the program called ``prog``."""
    return (
        f"Usage: {prog} <file1> <file2> [<options>]\n"
        "file1 - problem statement, file2 - where to output the solution\n"
        "\n"
        "Options:\n"
        "  --beta_correction       - Enables beta-correction mechanism.\n"
        "  --log_level <option>    - Log level: none, normal, verbose.\n"
        "  --n_near <value>        - Sets the preferred n_near.\n"
        "  --k_max <value>         - Sets the preferred k_max.\n"
        "  --t_max <value>         - Sets the preferred t_max (in secs).\n"
        "  --t_max_ms <value>      - Sets the budget in milliseconds (overrides --t_max).\n"
        "  --i_rand <value>        - Sets the preferred i_rand.\n"
        "  --lower_bound <value>   - Sets the preferred lower_bound.\n"
        "  --seed <value>          - Sets the pseudo-random seed.\n"
        "  --initial_solution <f>  - Import initial solution from file.\n"
        "  --log_incumbent_solutions - Emit full incumbent routes as JSON lines.\n"
    )


def _parse_integer(text: str) -> int | None:
    match = _INTEGER.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    value = int(digits)
    return -value if sign == "-" else value


def _next_int(name: str, rest: Iterator[str]) -> int:
    text = next(rest, None)
    value = None if text is None else _parse_integer(text)
    if value is None or not _INT_MIN <= value <= _INT_MAX:
        raise CliError(f"error: --{name} needs a valid integer.")
    return value


def _next_uint64(name: str, rest: Iterator[str]) -> int:
    text = next(rest, None)
    value = None if text is None else _parse_integer(text)
    if value is None or abs(value) > _UINT64_MAX:
        raise CliError(f"error: --{name} needs a valid integer.")
    # A leading minus sign wraps around, as unsigned conversion does.
    return value % (_UINT64_MAX + 1)


def _apply_option(opts: CliOptions, arg: str, rest: Iterator[str]) -> None:
    name = arg[2:] if arg.startswith("--") else None

    if name == "beta_correction":
        opts.beta_correction = True
    elif name == "log_level":
        value = next(rest, None)
        if value is None:
            raise CliError("error: --log_level needs a valid option.")
        if value not in _LOG_LEVEL_NAMES:
            raise CliError(f"error: --log_level invalid option '{value}' given.")
        opts.log_level = _LOG_LEVEL_NAMES[value]
    elif name in ("n_near", "k_max", "i_rand", "lower_bound", "t_max"):
        setattr(opts, name, _next_int(name, rest))
    elif name == "t_max_ms":
        opts.t_max_ms = _next_int(name, rest)
        opts.has_t_max_ms = True
    elif name == "initial_solution":
        value = next(rest, None)
        if value is None:
            raise CliError("error: --initial_solution needs a file path.")
        opts.initial_solution_file = value
    elif name == "log_incumbent_solutions":
        opts.log_incumbent_solutions = True
    elif name == "seed":
        opts.seed = _next_uint64(name, rest)
        opts.has_seed = True
    else:
        raise CliError(f'Cannot process the unknown option "{arg}".')


def parse_arguments(argv: Sequence[str]) -> CliOptions:
    """Parse ``argv`` (program name first) into options.

    With fewer than two file arguments the usage text is printed and the
    program exits successfully.
    """
    args = list(argv)
    if len(args) < 3:
        print(usage(args[0] if args else "routemin"), end="")
        raise SystemExit(0)

    opts = CliOptions(problem_file=args[1], solution_file=args[2])
    rest = iter(args[3:])
    for arg in rest:
        if not arg.startswith("-"):
            raise CliError(f'Found the unexpected argument "{arg}".')
        _apply_option(opts, arg, rest)
    return opts