from pathlib import Path

import pytest
from pydantic import ValidationError

from combinable.config import load_config


def test_zero_retry_budget(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("retry:\n  max_tries: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_inverted_string_lengths(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("strings:\n  min_length: 9\n  max_length: 3\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_top_level_list_is_rejected(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(cfg_file, env={})


def test_partial_override_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("retry:\n  max_tries: 25\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.retry.max_tries == 25
    assert cfg.strings.max_length == 20
