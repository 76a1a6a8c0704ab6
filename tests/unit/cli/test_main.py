"""Unit tests for the lab-budget CLI."""

import json
from pathlib import Path

import pytest
import yaml

from lab_budget.cli import main
from lab_budget.cli.main import build_configuration, create_parser
from lab_budget.domain import CalculationMode


class TestBuildConfiguration:
    """Test suite for combining config files and flags."""

    def test_defaults(self) -> None:
        """Test no flags gives the default configuration."""
        args = create_parser().parse_args(["estimate"])
        config = build_configuration(args)
        assert config.instances_per_person == 9
        assert config.mode is CalculationMode.DAYS_TO_BUDGET

    def test_deployment_preset(self) -> None:
        """Test --deployment seeds instances."""
        args = create_parser().parse_args(["estimate", "--deployment", "non-clustered"])
        assert build_configuration(args).instances_per_person == 4

    def test_explicit_instances_override_preset(self) -> None:
        """Test --instances wins over the preset."""
        args = create_parser().parse_args(
            ["estimate", "--deployment", "standalone", "--instances", "2"]
        )
        config = build_configuration(args)
        assert config.deployment_type == "standalone"
        assert config.instances_per_person == 2

    def test_flags_override_file(self, tmp_path: Path) -> None:
        """Test flags take precedence over configuration file values."""
        path = tmp_path / "lab.yaml"
        path.write_text("number_of_users: 10\nruntime_per_day: 3\n")

        args = create_parser().parse_args(
            ["estimate", "--config", str(path), "--users", "4", "--mode", "budget-to-days"]
        )
        config = build_configuration(args)
        assert config.number_of_users == 4
        assert config.runtime_per_day == 3
        assert config.mode is CalculationMode.BUDGET_TO_DAYS

    def test_no_maintenance_flag(self, tmp_path: Path) -> None:
        """Test --no-maintenance switches off a file setting."""
        path = tmp_path / "lab.json"
        path.write_text(json.dumps({"maintenance_enabled": True}))

        args = create_parser().parse_args(["estimate", "-c", str(path), "--no-maintenance"])
        assert build_configuration(args).maintenance_enabled is False


class TestMain:
    """Test suite for CLI commands."""

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test missing command prints help and fails."""
        assert main([]) == 1
        assert "lab-budget" in capsys.readouterr().out

    def test_estimate_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test default text estimate."""
        assert main(["estimate"]) == 0

        out = capsys.readouterr().out
        assert "Total: ₹235.87" in out
        assert "= 9 instances" in out
        assert "Required budget for 10 days" in out
        assert "₹2,358.72 ($28.08)" in out
        assert "Cost Optimization Tip" not in out

    def test_estimate_budget_to_days_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test Budget -> Days text output with per-person section and tip."""
        code = main([
            "estimate", "--mode", "budget-to-days", "--budget", "4000", "--users", "2",
        ])
        assert code == 0

        out = capsys.readouterr().out
        # ₹471.744/day
        assert "covers 8.48 days" in out
        assert "Whole days: 8" in out
        # 4000 - 8 × 471.744
        assert "Remaining: ₹226.05" in out
        assert "Per Person:" in out
        assert "Runtime: 8 days" in out
        assert "Cost Optimization Tip" in out

    def test_estimate_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON output."""
        assert main(["estimate", "--maintenance", "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["results"]["daily_cost_inr"] == pytest.approx(294.84)
        assert data["results"]["required_budget_inr"] == pytest.approx(2948.4)

    def test_estimate_yaml(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test YAML output."""
        assert main(["estimate", "--deployment", "standalone", "--format", "yaml"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["configuration"]["instances_per_person"] == 1

    def test_estimate_markdown(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test Markdown output."""
        assert main(["estimate", "--format", "markdown"]) == 0
        assert "# Lab Budget Analysis" in capsys.readouterr().out

    def test_estimate_output_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test saving the estimate to a file."""
        path = tmp_path / "report.md"
        assert main(["estimate", "--output", str(path)]) == 0

        assert path.read_text(encoding="utf-8").startswith("# Lab Budget Analysis")
        assert f"Saved to {path}" in capsys.readouterr().out

    def test_estimate_zero_users_passes_through(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unvalidated zero cost reports infinite days."""
        code = main(["estimate", "--mode", "budget-to-days", "--users", "0", "--format", "json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["results"]["affordable_days"] == "inf"

    def test_estimate_strict_rejects(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --strict turns bad input into an error exit."""
        code = main(["estimate", "--strict", "--exchange-rate", "0"])
        assert code == 1
        assert "Error: exchange_rate must be positive" in capsys.readouterr().err

    def test_estimate_missing_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test missing configuration file is an error."""
        assert main(["estimate", "--config", str(tmp_path / "nope.yaml")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_estimate_malformed_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a configuration file with a syntax error is an error exit."""
        path = tmp_path / "lab.json"
        path.write_text("{\"budget\": ")
        assert main(["estimate", "--config", str(path)]) == 1
        assert "Error: Cannot parse configuration file" in capsys.readouterr().err

    def test_estimate_non_numeric_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a wrongly typed configuration value is an error exit."""
        path = tmp_path / "lab.yaml"
        path.write_text("budget: lots\nmode: budget-to-days\n")
        assert main(["estimate", "--config", str(path)]) == 1
        assert "Error: budget must be a number" in capsys.readouterr().err

    def test_presets_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test preset listing."""
        assert main(["presets"]) == 0

        out = capsys.readouterr().out
        assert "standalone" in out
        assert "Full clustered deployment" in out

    def test_presets_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test preset listing as JSON."""
        assert main(["presets", "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [(p["deployment_type"], p["instances_per_person"]) for p in data] == [
            ("standalone", 1),
            ("non-clustered", 4),
            ("clustered", 9),
        ]
