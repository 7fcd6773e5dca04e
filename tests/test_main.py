"""Unit tests for the command-line entry point.

Tests main() and load_runtime_config() for:
- Keyword and log level priority (CLI > environment > config)
- JSON-lines output of kept items and --explain output
- Exit codes for configuration and items-file errors
"""

import json
import logging
from unittest.mock import patch

import pytest

from feedfilter.config.environment import EnvironmentConfig
from feedfilter.config.models import AppConfig, FilterConfig, LoggingConfig
from feedfilter.main import load_runtime_config, main

FULL_QUERY = 'flood,"traffic jam",-"canvey island",-chelmsford,except("museum","country park")'

ITEMS_YAML = """
- title: Traffic jam reported in Chelmsford
- title: Museum reopens after flood in Canvey Island
  summary: near the country park
  url: https://example.com/museum
- title: School wins award
"""


@pytest.fixture(autouse=True)
def isolate(monkeypatch, tmp_path):
    """Run each test in an empty directory with no feedfilter variables set."""
    for name in ["FEEDFILTER_KEYWORDS", "FEEDFILTER_MAX_WORKERS", "LOG_LEVEL", "ENVIRONMENT"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.yaml"
    path.write_text(ITEMS_YAML)
    return path


def read_json_lines(text):
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestLoadRuntimeConfig:
    """Override priority in load_runtime_config()."""

    def _mock_configs(self, keywords=None, env_keywords=None, env_level=None, env_workers=None):
        app_config = AppConfig(
            filter=FilterConfig(keywords=keywords),
            logging=LoggingConfig(level="WARNING"),
        )
        env_config = EnvironmentConfig(
            filter_keywords=env_keywords, log_level=env_level, max_workers=env_workers
        )
        return app_config, env_config

    def test_config_values_used_by_default(self):
        with patch("feedfilter.main.load_config") as mock_load:
            mock_load.return_value = self._mock_configs(keywords="flood")
            app_config, env_config = load_runtime_config(None, None, None)

        assert app_config.filter.keywords == "flood"
        assert env_config.log_level == "WARNING"

    def test_environment_overrides_config(self):
        with patch("feedfilter.main.load_config") as mock_load:
            mock_load.return_value = self._mock_configs(
                keywords="flood", env_keywords="storm", env_level="ERROR", env_workers=3
            )
            app_config, env_config = load_runtime_config(None, None, None)

        assert app_config.filter.keywords == "storm"
        assert app_config.pipeline.max_workers == 3
        assert env_config.log_level == "ERROR"

    def test_cli_overrides_environment(self):
        with patch("feedfilter.main.load_config") as mock_load:
            mock_load.return_value = self._mock_configs(
                keywords="flood", env_keywords="storm", env_level="ERROR"
            )
            app_config, env_config = load_runtime_config(None, "-chelmsford", "DEBUG")

        assert app_config.filter.keywords == "-chelmsford"
        assert env_config.log_level == "DEBUG"

    def test_empty_cli_query_clears_keywords(self):
        with patch("feedfilter.main.load_config") as mock_load:
            mock_load.return_value = self._mock_configs(keywords="flood")
            app_config, _ = load_runtime_config(None, "", None)

        assert app_config.filter.keywords == ""


class TestMain:
    """End-to-end runs of main()."""

    def test_writes_kept_items(self, items_file, capsys):
        exit_code = main(["--items", str(items_file), "--query", FULL_QUERY])

        assert exit_code == 0
        output = read_json_lines(capsys.readouterr().out)
        assert output == [
            {
                "title": "Museum reopens after flood in Canvey Island",
                "summary": "near the country park",
                "url": "https://example.com/museum",
            }
        ]

    def test_uses_keywords_from_config_file(self, tmp_path, items_file, capsys):
        config_file = tmp_path / "filters.yaml"
        config_file.write_text("filter:\n  keywords: '-chelmsford'\n")

        exit_code = main(["--items", str(items_file), "--config", str(config_file)])

        assert exit_code == 0
        titles = [item["title"] for item in read_json_lines(capsys.readouterr().out)]
        assert titles == ["Museum reopens after flood in Canvey Island", "School wins award"]

    def test_uses_keywords_from_environment(self, items_file, capsys, monkeypatch):
        monkeypatch.setenv("FEEDFILTER_KEYWORDS", "school")

        assert main(["--items", str(items_file)]) == 0
        titles = [item["title"] for item in read_json_lines(capsys.readouterr().out)]
        assert titles == ["School wins award"]

    def test_no_keywords_keeps_everything(self, items_file, capsys):
        assert main(["--items", str(items_file)]) == 0
        assert len(read_json_lines(capsys.readouterr().out)) == 3

    def test_explain_writes_every_item(self, items_file, capsys):
        exit_code = main(["--items", str(items_file), "--query", FULL_QUERY, "--explain"])

        assert exit_code == 0
        output = read_json_lines(capsys.readouterr().out)
        assert [record["rationale"]["decision"] for record in output] == [
            "excluded",
            "kept",
            "no_include_match",
        ]
        assert output[1]["rationale"]["override_group"] == 0

    def test_logs_go_to_stderr(self, items_file, capsys):
        main(["--items", str(items_file), "--query", "flood", "--log-level", "INFO"])

        captured = capsys.readouterr()
        assert "Pipeline run completed" in captured.err
        assert "Pipeline run completed" not in captured.out

    def test_missing_items_file(self, tmp_path, capsys):
        exit_code = main(["--items", str(tmp_path / "missing.yaml")])

        assert exit_code == 1
        assert "Items Error" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path, items_file, capsys):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("pipeline:\n  max_workers: 0\n")

        exit_code = main(["--items", str(items_file), "--config", str(config_file)])

        assert exit_code == 1
        assert "Configuration Error" in capsys.readouterr().err

    def test_invalid_environment(self, items_file, capsys, monkeypatch):
        monkeypatch.setenv("FEEDFILTER_MAX_WORKERS", "lots")

        assert main(["--items", str(items_file)]) == 1
        assert "FEEDFILTER_MAX_WORKERS" in capsys.readouterr().err

    def test_query_warnings_are_logged(self, items_file, capsys):
        exit_code = main(["--items", str(items_file), "--query", 'flood,"jam'])

        assert exit_code == 0
        assert "Unbalanced double quote" in capsys.readouterr().err

    def test_items_argument_is_required(self):
        with pytest.raises(SystemExit):
            main([])
