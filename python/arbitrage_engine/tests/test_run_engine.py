import json

from click.testing import CliRunner

from arbitrage_engine.app import run_engine
from arbitrage_engine.app.core.config import EngineConfig
from arbitrage_engine.app.models import ProcessResult


def _results(output):
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


class TestRunEngine:
    """Test command line entry point."""

    def test_single_run(self):
        result = CliRunner().invoke(run_engine.main, ["--metrics-port", "0"])

        assert result.exit_code == 0
        results = _results(result.stdout)
        assert len(results) == 1
        assert results[0]["success"] is True
        assert results[0]["data"]["processed"] == 1
        assert results[0]["message"] == "Processing completed successfully"

    def test_multiple_runs(self):
        result = CliRunner().invoke(
            run_engine.main, ["--runs", "3", "--verbose", "--metrics-port", "0"]
        )

        assert result.exit_code == 0
        assert [r["data"]["processed"] for r in _results(result.stdout)] == [1, 2, 3]

    def test_options_build_engine_config(self, mocker):
        """Test CLI flags override the environment defaults."""
        engine_cls = mocker.patch.object(run_engine, "ArbitrageEngine", autospec=True)
        engine_cls.return_value.execute.return_value = ProcessResult.ok({"processed": 1})

        result = CliRunner().invoke(
            run_engine.main,
            ["--quiet", "--timeout", "250", "--max-retries", "0", "--metrics-port", "0"],
        )

        assert result.exit_code == 0
        engine_cls.assert_called_once_with(
            EngineConfig(verbose=False, timeout=250, max_retries=0)
        )

    def test_metrics_server_started(self, mocker):
        start = mocker.patch.object(run_engine, "start_http_server")

        result = CliRunner().invoke(run_engine.main, ["--metrics-port", "9123"])

        assert result.exit_code == 0
        start.assert_called_once_with(9123)

    def test_invalid_runs(self):
        result = CliRunner().invoke(run_engine.main, ["--runs", "0"])

        assert result.exit_code == 2

    def test_unexpected_error_aborts(self, mocker):
        """Test unexpected failures abort the command."""
        mocker.patch.object(
            run_engine, "ArbitrageEngine", side_effect=RuntimeError("boom")
        )

        result = CliRunner().invoke(run_engine.main, ["--metrics-port", "0"])

        assert result.exit_code == 1
        assert "Error: boom" in result.output

    def test_results_printed_as_they_finish(self, mocker):
        """Test finished results are printed even when a later run aborts."""
        engine_cls = mocker.patch.object(run_engine, "ArbitrageEngine", autospec=True)
        engine_cls.return_value.execute.side_effect = [
            ProcessResult.ok({"processed": 1, "status": "completed"}),
            RuntimeError("loop closed"),
        ]

        result = CliRunner().invoke(
            run_engine.main, ["--runs", "3", "--metrics-port", "0"]
        )

        assert result.exit_code == 1
        assert [r["data"]["processed"] for r in _results(result.stdout)] == [1]
        assert "Error: loop closed" in result.output
