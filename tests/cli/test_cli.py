"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from docdigest.cli.main import app
from docdigest.summarization.pipeline import NO_CONTENT_PLACEHOLDER

runner = CliRunner()

QUIET = ["--log-level", "ERROR"]


@pytest.fixture
def report_file(tmp_path, article):
    path = tmp_path / "report.txt"
    path.write_text(article, encoding="utf-8")
    return path


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    return path


def invoke_json(*args, **kwargs):
    result = runner.invoke(app, ["summarize", *args, "--json", *QUIET], **kwargs)
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestSummarizeCommand:
    def test_text_output(self, report_file):
        result = runner.invoke(app, ["summarize", str(report_file), *QUIET])
        assert result.exit_code == 0, result.output
        assert result.stdout.startswith("ANNUAL ENERGY REVIEW\n\nKey Points:\n\nMain Topics:")

    def test_json_output(self, report_file):
        data = invoke_json(str(report_file), "--max-topics", "3")
        assert data["title"] == "ANNUAL ENERGY REVIEW"
        assert data["topics"][0] == "Solar capacity"
        assert len(data["topics"]) == 3
        assert data["keyPoints"]
        assert data["analytics"]["wordCount"] == data["wordCount"]

    def test_explicit_title(self, report_file):
        assert invoke_json(str(report_file), "--title", "Energy")["title"] == "Energy"

    def test_form_feed_separates_pages(self, tmp_path, synthetic_lines):
        path = tmp_path / "paged.txt"
        path.write_text("\n".join(synthetic_lines[:20]) + "\f" + "\n".join(synthetic_lines[20:]))
        data = invoke_json(str(path), "--max-key-points", "2")
        assert data["pageCount"] == 2
        assert [p["page"] for p in data["keyPoints"]] == [1, 1]

    def test_sentence_length_options(self, report_file):
        data = invoke_json(str(report_file), "--min-length", "250")
        assert data["keyPoints"] == [{"text": NO_CONTENT_PLACEHOLDER}]

    def test_ocr_file(self, empty_file, report_file):
        data = invoke_json(str(empty_file), "--ocr-file", str(report_file))
        assert "extractionQuality" in data
        assert data["keyPoints"]

    def test_transcript(self, tmp_path, clean_transcript):
        path = tmp_path / "meeting.txt"
        path.write_text(clean_transcript)
        data = invoke_json(str(path), "--transcript")
        assert data["extractionQuality"]["quality"] == "excellent"

    def test_empty_file_fails(self, empty_file):
        result = runner.invoke(app, ["summarize", str(empty_file), *QUIET])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_fallback_summary(self, empty_file):
        result = runner.invoke(app, ["summarize", str(empty_file), "--fallback", *QUIET])
        assert result.exit_code == 0, result.output
        assert '# Summary of "empty"' in result.stdout

    def test_invalid_key_point_limit(self, report_file):
        result = runner.invoke(app, ["summarize", str(report_file), "--max-key-points", "0"])
        assert result.exit_code == 2

    def test_missing_input_file(self, tmp_path):
        result = runner.invoke(app, ["summarize", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2

    def test_config_file(self, tmp_path, report_file):
        config = tmp_path / "docdigest.yaml"
        config.write_text("summarizer:\n  max_topics: 2\n")
        data = invoke_json(str(report_file), "--config", str(config))
        assert len(data["topics"]) == 2

    def test_missing_config_file(self, tmp_path, report_file):
        result = runner.invoke(
            app, ["summarize", str(report_file), "--config", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_environment_override(self, report_file):
        data = invoke_json(str(report_file), env={"DOCDIGEST_SUMMARIZER__MAX_TOPICS": "1"})
        assert data["topics"] == ["Solar capacity"]


class TestTopicsCommand:
    def test_topics(self, report_file):
        result = runner.invoke(app, ["topics", str(report_file), "--max-topics", "2", *QUIET])
        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert len(lines) == 2
        assert lines[0] == "Solar capacity"

    def test_empty_file(self, empty_file):
        result = runner.invoke(app, ["topics", str(empty_file), *QUIET])
        assert result.exit_code == 1


def test_config_show():
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0, result.output
    assert "max_key_points: 20" in result.stdout
