from user_registry.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("USER_REGISTRY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("USER_REGISTRY_SEED_DEMO", raising=False)

    s = Settings(_env_file=None)
    assert s.log_level == "WARNING"
    assert s.seed_demo is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("USER_REGISTRY_LOG_LEVEL", "debug")
    monkeypatch.setenv("USER_REGISTRY_SEED_DEMO", "true")

    s = get_settings()
    assert s.log_level == "DEBUG"
    assert s.seed_demo is True
