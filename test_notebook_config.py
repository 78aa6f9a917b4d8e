#!/usr/bin/env python3
"""
Tests for notebook_config.json loading.

Run with: uv run pytest test_notebook_config.py
"""
import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from services.notebook_config import (
    DEFAULT_CONFIG,
    NotebookConfig,
    get_config,
    load_config,
    reset_config_cache,
)


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config_cache()
    yield
    reset_config_cache()


def test_missing_file_uses_defaults(tmp_path):
    path = tmp_path / "notebook_config.json"

    config = load_config(path)

    assert config == NotebookConfig(raw_config=DEFAULT_CONFIG)
    assert config.json_dump_kwargs() == {'indent': None, 'sort_keys': False, 'ensure_ascii': False}
    assert not path.exists()


def test_loads_values_from_file(tmp_path):
    path = tmp_path / "notebook_config.json"
    path.write_text(json.dumps({
        "json": {"indent": 1, "sort_keys": True, "comment": "ignored"},
    }), encoding="utf-8")

    config = load_config(path)

    assert config.indent == 1
    assert config.sort_keys is True
    assert config.ensure_ascii is False


def test_invalid_json_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "notebook_config.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="services.notebook_config"):
        config = load_config(path)

    assert config.json_dump_kwargs() == NotebookConfig().json_dump_kwargs()
    assert any("Failed to parse" in r.getMessage() for r in caplog.records)


def test_config_is_cached_per_path(tmp_path):
    path = tmp_path / "notebook_config.json"
    path.write_text(json.dumps({"json": {"indent": 2}}), encoding="utf-8")

    first = load_config(path)
    path.write_text(json.dumps({"json": {"indent": 4}}), encoding="utf-8")

    assert load_config(path) is first
    assert get_config() is first
    assert load_config(path, force_reload=True).indent == 4


def test_get_config_loads_from_cwd(tmp_path, monkeypatch):
    (tmp_path / "notebook_config.json").write_text(
        json.dumps({"json": {"ensure_ascii": True}}), encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    assert get_config().ensure_ascii is True


@pytest.mark.parametrize("raw", [
    {"json": None},
    {"json": "compact"},
    ["json"],
    None,
])
def test_ill_typed_sections_fall_back_to_defaults(tmp_path, caplog, raw):
    path = tmp_path / "notebook_config.json"
    path.write_text(json.dumps(raw), encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="services.notebook_config"):
        config = load_config(path)

    assert config.json_dump_kwargs() == NotebookConfig().json_dump_kwargs()
    assert any(r.levelno == logging.ERROR for r in caplog.records)


@pytest.mark.parametrize("opts", [
    {"indent": "x"},
    {"indent": True},
    {"indent": -1},
    {"indent": 1.5},
    {"sort_keys": "yes"},
    {"ensure_ascii": 1},
])
def test_ill_typed_values_are_ignored(tmp_path, caplog, opts):
    path = tmp_path / "notebook_config.json"
    path.write_text(json.dumps({"json": opts}), encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="services.notebook_config"):
        config = load_config(path)

    assert config.json_dump_kwargs() == NotebookConfig().json_dump_kwargs()
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_loaded_config_formats_file_contents(tmp_path):
    from document.serialization import file_contents_from_notebook, new_notebook

    path = tmp_path / "notebook_config.json"
    path.write_text(json.dumps({"json": {"indent": 2}}), encoding="utf-8")

    text = file_contents_from_notebook(new_notebook(), config=load_config(path))

    assert text.startswith('{\n  "cells"')
    assert json.loads(text)["nbformat"] == 4


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
