"""Unit tests for the gains CLI."""

from __future__ import annotations

from PIL import Image
from typer.testing import CliRunner

from gains.cli import app
from gains.utils.images import DATA_URL_PREFIX

runner = CliRunner()


class TestWeightCLI:
    def test_default_pounds(self, settings):
        result = runner.invoke(app, ["weight", "185.5"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "185.5 lbs"

    def test_kilograms(self, settings):
        result = runner.invoke(app, ["weight", "72", "--unit", "kg"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "72 kg"

    def test_locale(self, settings):
        result = runner.invoke(app, ["weight", "1234.5", "--locale", "de_DE"])
        assert result.stdout.strip() == "1.234,5 lbs"

    def test_unknown_unit(self, settings):
        result = runner.invoke(app, ["weight", "72", "--unit", "stone"])
        assert result.exit_code != 0


class TestDateCLI:
    def test_date_only(self, settings):
        result = runner.invoke(app, ["date", "2026-10-19T15:30", "--date-only"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "Oct 19, 2026"

    def test_date_time(self, settings):
        result = runner.invoke(app, ["date", "2026-10-19T15:30"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip().startswith("Oct 19, 2026, 3:30")

    def test_locale_override(self, settings):
        result = runner.invoke(app, ["date", "2026-10-19T15:30", "-d", "-l", "de_DE"])
        assert result.stdout.strip() == "19.10.2026"

    def test_defaults_to_now(self, settings):
        result = runner.invoke(app, ["date", "--date-only"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip()

    def test_bad_timestamp(self, settings):
        result = runner.invoke(app, ["date", "yesterday"])
        assert result.exit_code == 2


class TestEncodeImageCLI:
    def test_encodes_file(self, settings, tmp_path):
        path = tmp_path / "meal.png"
        Image.new("RGB", (4096, 2048), color="orange").save(path)
        result = runner.invoke(app, ["encode-image", str(path)])
        assert result.exit_code == 0, result.output
        assert result.stdout.startswith(DATA_URL_PREFIX)

    def test_no_resize_flag(self, settings, tmp_path):
        path = tmp_path / "meal.png"
        Image.new("RGB", (64, 32)).save(path)
        result = runner.invoke(app, ["encode-image", str(path), "--no-resize", "-q", "0.3"])
        assert result.exit_code == 0, result.output
        assert result.stdout.startswith(DATA_URL_PREFIX)

    def test_unreadable_image_exits_1(self, settings, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("definitely not a jpeg")
        result = runner.invoke(app, ["encode-image", str(path)])
        assert result.exit_code == 1
        assert DATA_URL_PREFIX not in result.stdout

    def test_missing_file(self, settings, tmp_path):
        result = runner.invoke(app, ["encode-image", str(tmp_path / "missing.png")])
        assert result.exit_code == 2

    def test_quality_out_of_range(self, settings, tmp_path):
        path = tmp_path / "meal.png"
        Image.new("RGB", (8, 8)).save(path)
        result = runner.invoke(app, ["encode-image", str(path), "--quality", "1.5"])
        assert result.exit_code == 2

    def test_oversized_image_exits_1(self, settings, tmp_path, monkeypatch):
        path = tmp_path / "huge.png"
        Image.new("RGB", (300, 300)).save(path)
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100 * 100)
        result = runner.invoke(app, ["encode-image", str(path)])
        assert result.exit_code == 1
        assert DATA_URL_PREFIX not in result.stdout
