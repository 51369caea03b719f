from chance.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.seed.value is None
    assert cfg.seed.env == "CHANCE_SEED"
    assert cfg.unique.max_duplicates_factor == 50
    assert cfg.normal.pool_attempts == 100
    assert cfg.logging.level == "WARNING"
    assert cfg.cli.count == 1


def test_defaults_match_model_defaults() -> None:
    from chance.config import ChanceConfig

    assert load_config(env={}).model_dump() == ChanceConfig().model_dump()
