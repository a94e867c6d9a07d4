import config


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "FORCE_WRITE", "ESCAPE_XML"):
        monkeypatch.delenv(name, raising=False)
    conf = config.Config()
    assert conf.log_level == config.LogLevel.info
    assert conf.force is False
    assert conf.escape_xml is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FORCE_WRITE", "true")
    monkeypatch.setenv("ESCAPE_XML", "1")
    conf = config.Config()
    assert conf.log_level.value == "DEBUG"
    assert conf.force is True
    assert conf.escape_xml is True


def test_get_conf_is_singleton(monkeypatch):
    monkeypatch.setattr(config, "settings", None)
    assert config.get_conf() is config.get_conf()
