from combinable.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.retry.max_tries == 10_000
    assert cfg.strings.min_length == 0
    assert cfg.strings.max_length == 20
    assert cfg.seed.seed_env == "COMBINABLE_SEED"
    assert cfg.seed.value is None
