import pytest
from click.testing import CliRunner

from cache_me.cli.commands import cli
from cache_me.generation.calculator import SAMPLE_INPUT


@pytest.fixture
def runner():
    return CliRunner()


LOG = """\
0 /2019
100 /2019
700000 /2019
5 /2019/sask
"""


class TestCalculateCommand:
    def test_reads_stdin(self, runner):
        result = runner.invoke(cli, ["calculate", "--minutes", "10"], input=LOG)
        assert result.exit_code == 0
        assert "Request Count" in result.output
        assert "/2019/sask" in result.output

    def test_reads_file(self, runner, tmp_path):
        logfile = tmp_path / "access.log"
        logfile.write_text(LOG)
        result = runner.invoke(cli, ["calculate", str(logfile), "-m", "10"])
        assert result.exit_code == 0
        rows = {line.split()[0]: line.split()[1] for line in result.output.splitlines()[2:]}
        assert rows == {"/2019": "2", "/2019/sask": "1"}

    def test_groups_by_routes(self, runner):
        result = runner.invoke(
            cli, ["calculate", "-m", "10", "--routes", "/:season,/:season/:eventId"], input=LOG
        )
        assert result.exit_code == 0
        assert "/:season/:eventId" in result.output

    def test_no_group_by_route(self, runner):
        result = runner.invoke(
            cli, ["calculate", "-m", "10", "-r", "/:season", "--no-group-by-route"], input=LOG
        )
        assert result.exit_code == 0
        assert "/:season" not in result.output

    def test_routes_from_env(self, runner):
        result = runner.invoke(
            cli, ["calculate"], input=LOG,
            env={"CACHE_ME_ROUTES": "/:season", "CACHE_ME_MINUTES": "10"},
        )
        assert result.exit_code == 0
        assert "/:season" in result.output

    def test_show_log(self, runner):
        result = runner.invoke(cli, ["calculate", "-m", "10", "--show-log"], input=LOG)
        assert result.exit_code == 0
        assert "0 /2019\n5 /2019/sask\n700000 /2019" in result.output

    def test_writes_log_output(self, runner, tmp_path):
        output = tmp_path / "misses.log"
        result = runner.invoke(
            cli, ["calculate", "-m", "10", "--log-output", str(output)], input=LOG
        )
        assert result.exit_code == 0
        assert output.read_text() == "0 /2019\n5 /2019/sask\n700000 /2019\n"

    def test_invalid_minutes(self, runner):
        result = runner.invoke(cli, ["calculate", "--minutes", "ten"], input=LOG)
        assert result.exit_code == 2
        assert "whole number of minutes" in result.output

    def test_reports_skipped_lines(self, runner):
        result = runner.invoke(cli, ["calculate"], input="1 /a\nbroken\n")
        assert result.exit_code == 0
        assert "Skipped 1 malformed line(s)" in result.output

    def test_empty_input(self, runner):
        result = runner.invoke(cli, ["calculate"], input="")
        assert result.exit_code == 0
        assert "No results... yet." in result.output


class TestSampleCommand:
    def test_prints_sample(self, runner):
        result = runner.invoke(cli, ["sample"])
        assert result.exit_code == 0
        assert result.output == SAMPLE_INPUT

    def test_sample_round_trips_through_calculate(self, runner):
        sample = runner.invoke(cli, ["sample"]).output
        result = runner.invoke(cli, ["calculate"], input=sample)
        assert result.exit_code == 0
        assert "/hello" in result.output
