"""Tests for the kdp-cover command line."""

import json

import pytest
from click.testing import CliRunner
from pypdf import PdfReader

from main import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Tests for the click command."""

    def test_summary(self, runner):
        result = runner.invoke(main, ["--trim", "6x9", "--pages", "200"])

        assert result.exit_code == 0
        assert "Spine width: 0.4504 in" in result.output
        assert "12.7004 x 9.2500 in" in result.output

    def test_geometry_json(self, runner):
        result = runner.invoke(main, ["--geometry", "--pages", "200", "--paper", "cream", "--binding", "hardcover"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["spine_width"] == pytest.approx(0.55)
        assert data["binding_type"] == "hardcover"
        assert data["safe_zones"]["back"]["width"] == pytest.approx(3.5)

    def test_spine_chart(self, runner):
        result = runner.invoke(main, ["--spine-chart"])

        assert result.exit_code == 0
        assert "    24    0.0600    0.0600" in result.output
        assert "   200    0.4504    0.5000" in result.output

    def test_make_cover_and_validate(self, runner, tmp_path):
        out = tmp_path / "covers" / "cover.pdf"
        png = tmp_path / "template.png"
        result = runner.invoke(main, [
            "--make-cover", "--pages", "150", "--trim", "8.5x11",
            "--title", "Recipe Book", "--author", "Jo", "--out", str(out), "--template-png", str(png),
        ])

        assert result.exit_code == 0, result.output
        assert out.exists() and png.exists()
        assert len(PdfReader(str(out)).pages) == 1

        result = runner.invoke(main, ["--validate-cover-path", str(out), "--pages", "150", "--trim", "8.5x11"])
        assert result.exit_code == 0
        assert "No issues found" in result.output

        result = runner.invoke(main, ["--validate-cover-path", str(out), "--pages", "300", "--trim", "8.5x11"])
        assert result.exit_code == 1
        assert "ERROR:" in result.output

    def test_thin_spine_warning(self, runner, tmp_path):
        out = tmp_path / "thin.pdf"
        result = runner.invoke(main, ["--make-cover", "--pages", "24", "--title", "Tiny", "--out", str(out)])

        assert result.exit_code == 0
        assert "Spine too narrow for text" in result.output

    def test_print_spec_file(self, runner, write_json):
        path = write_json({"bleed": 0.25})
        result = runner.invoke(main, ["--print-spec", str(path), "--geometry", "--pages", "200"])

        assert result.exit_code == 0
        assert json.loads(result.output)["total_width"] == pytest.approx(12.9504)

    def test_bad_print_spec_exits_1(self, runner, write_json):
        path = write_json({"min_spine_width": -1})
        result = runner.invoke(main, ["--print-spec", str(path)])

        assert result.exit_code == 1
        assert "❌" in result.output

    def test_rejects_zero_pages(self, runner):
        result = runner.invoke(main, ["--pages", "0"])
        assert result.exit_code == 2

    def test_default_out_path_from_title(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["--make-cover", "--title", "My Daily Planner!"])

            assert result.exit_code == 0
            assert "outputs/my-daily-planner.pdf" in result.output
