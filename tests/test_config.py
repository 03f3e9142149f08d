"""
Tests for environment-driven configuration and file decoding.
"""

from __future__ import annotations

import pytest

from core.config import ScoringConfig
from data_prep.loader import SelectedFile, decode_csv_bytes

_ENV_VARS = (
    "RISK_BACKEND", "RISK_API_BASE_URL", "RISK_API_KEY", "GPT_API_BASE_URL", "GPT_API_KEY",
    "RISK_TIMEOUT_SECONDS", "RISK_SIMULATION_DELAY", "RISK_SIMULATION_SEED",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes anything a .env file loaded
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env):
    cfg = ScoringConfig.from_env(env_path=None)
    assert cfg.backend == "local"
    assert cfg.simulation_delay_seconds == 2.0
    assert cfg.simulation_seed is None


def test_watson_backend(clean_env):
    clean_env.setenv("RISK_BACKEND", "Watson")
    clean_env.setenv("RISK_API_BASE_URL", "https://scorer.example/")
    clean_env.setenv("RISK_API_KEY", "abc")
    clean_env.setenv("RISK_SIMULATION_SEED", "11")
    cfg = ScoringConfig.from_env(env_path=None)
    assert cfg.backend == "watson"
    assert cfg.base_url == "https://scorer.example"
    assert cfg.api_key == "abc"
    assert cfg.simulation_seed == 11


def test_gpt_backend_reads_gpt_vars(clean_env):
    clean_env.setenv("RISK_BACKEND", "gpt")
    clean_env.setenv("GPT_API_BASE_URL", "https://gpt.example")
    clean_env.setenv("GPT_API_KEY", "g")
    cfg = ScoringConfig.from_env(env_path=None)
    assert (cfg.base_url, cfg.api_key) == ("https://gpt.example", "g")


def test_env_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("RISK_BACKEND=local\nRISK_SIMULATION_DELAY=0.5\n")
    cfg = ScoringConfig.from_env(env_path=env_file)
    assert cfg.simulation_delay_seconds == 0.5


def test_unknown_backend(clean_env):
    clean_env.setenv("RISK_BACKEND", "oracle")
    with pytest.raises(ValueError):
        ScoringConfig.from_env(env_path=None)


def test_decode_strips_bom_and_replaces_bad_bytes():
    assert decode_csv_bytes("\ufeffAge\n".encode("utf-8")) == "Age\n"
    assert decode_csv_bytes(b"A\xffB") == "A\ufffdB"


def test_selected_file_from_path(tmp_path):
    p = tmp_path / "loans.csv"
    p.write_bytes(b"Age\n30\n")
    f = SelectedFile.from_path(p)
    assert f.name == "loans.csv"
    assert f.size == 7
    assert f.mime_type == "text/csv"
    assert f.reader() == b"Age\n30\n"
