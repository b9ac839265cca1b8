import json

import pytest
from click.testing import CliRunner

from span.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def test_remap(runner):
    result = runner.invoke(main, ["remap", "0", "10", "100", "200"], input="5\n0\n10\n")
    assert result.exit_code == 0
    assert result.stdout == "150\n100\n200\n"


def test_negative_arguments(runner):
    result = runner.invoke(main, ["limit", "-1", "1"], input="-5\n0.5\n5\n")
    assert result.exit_code == 0
    assert result.stdout == "-1\n0.5\n1\n"


def test_limit_inverted_bounds(runner):
    result = runner.invoke(main, ["limit", "10", "0"], input="15\n")
    assert result.stdout == "10\n"


def test_eval_with_format(runner):
    result = runner.invoke(main, ["eval", "0", "10", "-f", "%.2f"], input="0.5\n")
    assert result.exit_code == 0
    assert result.stdout == "5.00\n"


def test_format_from_environment(runner):
    result = runner.invoke(main, ["eval", "0", "10"], input="0.25\n",
                           env={"SPAN_FORMAT": "%.1f"})
    assert result.stdout == "2.5\n"


def test_integer_format_survives_nan(runner):
    result = runner.invoke(main, ["eval", "0", "1", "-f", "%d"], input="nan\n0.5\n")
    assert result.exit_code == 0
    assert result.stdout == "nan\n0\n"


@pytest.mark.parametrize("fmt", ["%d %d", "hello"])
def test_invalid_format_is_usage_error(runner, fmt):
    result = runner.invoke(main, ["eval", "0", "1", "-f", fmt], input="0.5\n")
    assert result.exit_code == 2


def test_unparsable_lines_are_skipped(runner):
    result = runner.invoke(main, ["eval", "0", "10"], input="abc\n0.5\n")
    assert result.exit_code == 0
    assert result.stdout == "5\n"
    assert "abc" in result.stderr


def test_failing_value_is_skipped(runner):
    result = runner.invoke(main, ["deval", "5", "5"], input="5\n6\n")
    assert result.exit_code == 0
    assert result.stdout == "0\n"
    assert "skipping" in result.stderr


def test_snap(runner):
    result = runner.invoke(main, ["snap", "10", "0", "10"], input="4.8\n2.5\n")
    assert result.stdout == "5\n3\n"


def test_snap_bad_steps_aborts(runner):
    result = runner.invoke(main, ["snap", "0", "0", "10"], input="4.8\n")
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "steps must be a positive integer" in result.stderr


def test_divide(runner):
    result = runner.invoke(main, ["divide", "4", "0", "1"])
    assert result.exit_code == 0
    assert result.stdout == "0\n0.25\n0.5\n0.75\n"


def test_divide_negative_steps(runner):
    result = runner.invoke(main, ["divide", "-1", "0", "1"])
    assert result.exit_code == 1
    assert "steps cannot be negative" in result.stderr


def test_subintervals(runner):
    result = runner.invoke(main, ["subintervals", "2", "0", "10"])
    assert result.stdout == "0 5\n5 10\n"


def test_subintervals_json(runner):
    result = runner.invoke(main, ["subintervals", "2", "0", "10", "--json"])
    assert json.loads(result.stdout) == [{"start": 0, "end": 5}, {"start": 5, "end": 10}]


def test_random_seeded(runner):
    first = runner.invoke(main, ["random", "5", "0", "1", "--seed", "3"])
    second = runner.invoke(main, ["random", "5", "0", "1", "--seed", "3"])
    assert first.exit_code == 0
    assert first.stdout == second.stdout
    values = [float(line) for line in first.stdout.splitlines()]
    assert len(values) == 5
    assert all(0 <= v <= 1 for v in values)


def test_random_json(runner):
    result = runner.invoke(main, ["random", "3", "-5", "5", "--json", "--seed", "1"])
    values = json.loads(result.stdout)
    assert len(values) == 3
    assert all(-5 <= v <= 5 for v in values)


def test_random_negative_count(runner):
    result = runner.invoke(main, ["random", "-2", "0", "1"])
    assert result.exit_code == 1
    assert "count cannot be negative" in result.stderr


def test_encompass(runner):
    result = runner.invoke(main, ["encompass"], input="3\n-1\n7\n")
    assert result.exit_code == 0
    assert result.stdout == "-1 7\n"


def test_encompass_json(runner):
    result = runner.invoke(main, ["encompass", "--json"], input="3\n-1\n7\n")
    assert json.loads(result.stdout) == {"min": -1, "max": 7}


def test_encompass_no_data(runner):
    result = runner.invoke(main, ["encompass"], input="")
    assert result.exit_code == 1
    assert "no numbers found" in result.stderr


def test_divide_csv(runner):
    result = runner.invoke(main, ["divide", "2", "0", "1", "--fmt", "csv"])
    assert result.exit_code == 0
    assert "# divide" in result.stdout
    assert "index,value" in result.stdout
    assert "1,0.5" in result.stdout


def test_divide_parquet_is_rejected(runner):
    result = runner.invoke(main, ["divide", "2", "0", "1", "--fmt", "parquet"])
    assert result.exit_code == 2


def test_encompass_polars(runner):
    result = runner.invoke(main, ["encompass", "--fmt", "polars"], input="3\n-1\n")
    assert result.exit_code == 0
    assert "summary" in result.stdout
    assert "stat" in result.stdout


def test_spark_is_default_for_piped_input(runner):
    result = runner.invoke(main, [], input="10 20 30 40 50 60 70 80\n")
    assert result.exit_code == 0
    assert result.stdout == " ▂▃▄▅▆▇█\n"


def test_spark_fixed_bounds(runner):
    result = runner.invoke(main, ["spark", "0", "100"], input="10\n50\n90\n")
    assert result.stdout == "▂▅▇\n"


def test_spark_huge_sample(runner):
    result = runner.invoke(main, ["spark", "0", "1"], input="1e308\n")
    assert result.exit_code == 0
    assert result.stdout == "█\n"


def test_spark_implied_with_bounds(runner):
    result = runner.invoke(main, ["0", "100"], input="-10\n50\n110\n")
    assert result.stdout == " ▅█\n"


def test_spark_lower_bound_option(runner):
    result = runner.invoke(main, ["spark", "--min", "0"], input="5 10\n")
    assert result.stdout == "▅█\n"


def test_spark_window_with_color(runner):
    result = runner.invoke(main, ["spark", "--width", "3", "--color", "RED"],
                           input="10\n20\n30\n40\n50\n")
    assert result.exit_code == 0
    assert result.stdout.endswith("\r\033[31m ▅█\033[0m")


def test_spark_wrong_argument_count(runner):
    result = runner.invoke(main, ["spark", "1"], input="1\n")
    assert result.exit_code == 2


def test_spark_unknown_color(runner):
    result = runner.invoke(main, ["spark", "--color", "orange"], input="1\n")
    assert result.exit_code == 2


def test_spark_non_finite_bound(runner):
    result = runner.invoke(main, ["spark", "nan", "1"], input="1\n")
    assert result.exit_code == 1
    assert "finite" in result.stderr


def test_help_lists_commands(runner):
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    for name in ["remap", "limit", "snap", "divide", "spark"]:
        assert name in result.stdout
