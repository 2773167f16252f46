import pytest

from routemin.cli import CliError, CliOptions, LogLevel, parse_arguments, usage

BASE = ["routes", "problem.txt", "out.solution"]


def test_defaults():
    opts = parse_arguments(BASE)
    assert opts.problem_file == "problem.txt"
    assert opts.solution_file == "out.solution"
    assert opts.initial_solution_file is None
    assert opts.log_incumbent_solutions is False
    assert opts.beta_correction is False
    assert opts.log_level is LogLevel.VERBOSE
    assert opts.n_near == 100
    assert opts.k_max == 5
    assert opts.t_max == 365 * 86400 * 100
    assert opts.t_max_ms == -1
    assert opts.has_t_max_ms is False
    assert opts.i_rand == 1000
    assert opts.lower_bound == 0
    assert opts.has_seed is False
    assert opts.seed == 0


def test_smoke_command_line():
    opts = parse_arguments(BASE + ["--t_max_ms", "1", "--log_level", "none"])
    assert opts.t_max_ms == 1
    assert opts.has_t_max_ms is True
    assert opts.log_level is LogLevel.NONE


@pytest.mark.parametrize(
    "name, field",
    [
        ("n_near", "n_near"),
        ("k_max", "k_max"),
        ("t_max", "t_max"),
        ("i_rand", "i_rand"),
        ("lower_bound", "lower_bound"),
    ],
)
def test_integer_options(name, field):
    opts = parse_arguments(BASE + [f"--{name}", "42"])
    assert getattr(opts, field) == 42


def test_negative_and_signed_integers():
    opts = parse_arguments(BASE + ["--lower_bound", "-3", "--k_max", "+7"])
    assert opts.lower_bound == -3
    assert opts.k_max == 7


@pytest.mark.parametrize("level", ["none", "normal", "verbose"])
def test_log_levels(level):
    opts = parse_arguments(BASE + ["--log_level", level])
    assert opts.log_level.name.lower() == level


def test_flags_and_paths():
    opts = parse_arguments(
        BASE
        + [
            "--beta_correction",
            "--log_incumbent_solutions",
            "--initial_solution",
            "init.solution",
        ]
    )
    assert opts.beta_correction is True
    assert opts.log_incumbent_solutions is True
    assert opts.initial_solution_file == "init.solution"


def test_seed():
    opts = parse_arguments(BASE + ["--seed", "18446744073709551615"])
    assert opts.has_seed is True
    assert opts.seed == 2**64 - 1


def test_int_out_of_range_rejected():
    with pytest.raises(CliError, match="--n_near needs a valid integer"):
        parse_arguments(BASE + ["--n_near", "2147483648"])


def test_seed_out_of_range_rejected():
    with pytest.raises(CliError, match="--seed needs a valid integer"):
        parse_arguments(BASE + ["--seed", str(2**64)])


@pytest.mark.parametrize("value", ["abc", "12x", "", "1 ", "1.5"])
def test_invalid_integer_rejected(value):
    with pytest.raises(CliError, match="--k_max needs a valid integer"):
        parse_arguments(BASE + ["--k_max", value])


def test_missing_value_rejected():
    with pytest.raises(CliError, match="--i_rand needs a valid integer"):
        parse_arguments(BASE + ["--i_rand"])
    with pytest.raises(CliError, match="--log_level needs a valid option"):
        parse_arguments(BASE + ["--log_level"])
    with pytest.raises(CliError, match="--initial_solution needs a file path"):
        parse_arguments(BASE + ["--initial_solution"])


def test_invalid_log_level_rejected():
    with pytest.raises(CliError, match="invalid option 'loud'"):
        parse_arguments(BASE + ["--log_level", "loud"])


@pytest.mark.parametrize("arg", ["--unknown", "-x", "-", "--T_MAX"])
def test_unknown_option_rejected(arg):
    with pytest.raises(CliError, match="unknown option"):
        parse_arguments(BASE + [arg])


def test_unexpected_argument_rejected():
    with pytest.raises(CliError, match='unexpected argument "stray"'):
        parse_arguments(BASE + ["stray"])


def test_too_few_arguments_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_arguments(["routes", "problem.txt"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: routes <file1> <file2> [<options>]")


def test_usage_lists_options():
    text = usage("prog")
    assert "--t_max_ms <value>" in text
    assert "--log_incumbent_solutions" in text


def test_options_dataclass_equality():
    assert parse_arguments(BASE) == CliOptions("problem.txt", "out.solution")