import json

import pytest

from course_catalog.config import DEFAULT_EXPORT_PATH, load_config


def test_defaults():
    settings = load_config(env={})
    assert settings.catalog_file is None
    assert settings.export_path == DEFAULT_EXPORT_PATH
    assert settings.log_level == "WARNING"


def test_json_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"catalog_file": "courses.csv", "log_level": "debug", "unused": 1}))
    settings = load_config(path, env={})
    assert settings.catalog_file == "courses.csv"
    assert settings.log_level == "DEBUG"
    assert settings.export_path == DEFAULT_EXPORT_PATH


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"catalog_file": "courses.csv"}))
    settings = load_config(path, env={"COURSE_CATALOG_FILE": "other.csv", "COURSE_CATALOG_EXPORT": "x.duckdb"})
    assert settings.catalog_file == "other.csv"
    assert settings.export_path == "x.duckdb"


def test_dotenv_is_read(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    # setenv first so teardown removes what load_dotenv writes
    monkeypatch.setenv("COURSE_CATALOG_LOG_LEVEL", "placeholder")
    monkeypatch.delenv("COURSE_CATALOG_LOG_LEVEL")
    (tmp_path / ".env").write_text("COURSE_CATALOG_LOG_LEVEL=info\n")
    assert load_config().log_level == "INFO"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json", env={})
