"""
tests/test_config.py — YAML configuration loader
"""

from __future__ import annotations

import dataclasses

import pytest

from promohub.config import PromoHubConfig, load_config


def test_defaults_when_only_name_given(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text('marketplace_name: "PromoHubGo"\n', encoding="utf-8")

    cfg = load_config(path)
    assert cfg.marketplace_name == "PromoHubGo"
    assert cfg.api_port == 8000
    assert cfg.candidate_fetch_limit == 200
    assert cfg.suggestion_limit == 30
    assert cfg.search_max_limit == 50
    assert cfg.boosted_min_percent == 70


def test_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "marketplace_name: Test\n"
        "api_port: 9001\n"
        "candidate_fetch_limit: 500\n"
        "suggestion_limit: 10\n"
        "boosted_min_percent: 60\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert (cfg.api_port, cfg.candidate_fetch_limit, cfg.suggestion_limit) == (9001, 500, 10)
    assert cfg.boosted_min_percent == 60


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="config.yaml.example"):
        load_config(tmp_path / "nope.yaml")


def test_missing_name(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("api_port: 8000\n", encoding="utf-8")
    with pytest.raises(KeyError):
        load_config(path)


def test_config_is_frozen():
    cfg = PromoHubConfig(marketplace_name="X")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.api_port = 1  # type: ignore[misc]
