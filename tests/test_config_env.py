from pathlib import Path
from typing import Any

import pytest

from combinable.config import load_config
from combinable.generators import DrawContext, integers


def test_env_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("COMBINABLE_SEED", "42")
    cfg = load_config()
    assert cfg.seed.value == 42


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('seed:\n  seed_env: "CUSTOM_SEED"\n')
    monkeypatch.setenv("CUSTOM_SEED", "7")
    cfg = load_config(cfg_file)
    assert cfg.seed.seed_env == "CUSTOM_SEED"
    assert cfg.seed.value == 7


def test_non_integer_seed_rejected() -> None:
    with pytest.raises(ValueError):
        load_config(env={"COMBINABLE_SEED": "not-a-number"})


def test_seeded_config_is_reproducible() -> None:
    cfg = load_config(env={"COMBINABLE_SEED": "1234"})
    first = integers(64, context=DrawContext.from_config(cfg)).samples(10)
    second = integers(64, context=DrawContext.from_config(cfg)).samples(10)
    assert first == second


def test_context_carries_config_values(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("retry:\n  max_tries: 3\nstrings:\n  min_length: 2\n  max_length: 4\n")
    ctx = DrawContext.from_config(load_config(cfg_file, env={}))
    assert ctx.max_tries == 3
    assert (ctx.min_length, ctx.max_length) == (2, 4)
