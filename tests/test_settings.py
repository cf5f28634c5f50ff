from pathlib import Path

from boggle.settings import EDITABLE_FIELDS, Settings, get_editable_settings, update_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_default_dictionary_is_bundled():
    cfg = _fresh_settings()
    assert cfg.DICTIONARY_PATH.name == "words.txt"
    assert cfg.DICTIONARY_PATH.exists()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MAX_RESULTS", "5")
    monkeypatch.setenv("NOTIFY_ENABLED", "yes")
    monkeypatch.setenv("NTFY_TOPIC", "from-env")
    monkeypatch.setenv("DICTIONARY_PATH", "/tmp/other.txt")
    cfg = _fresh_settings()
    assert cfg.MAX_RESULTS == 5
    assert cfg.NOTIFY_ENABLED is True
    assert cfg.NTFY_TOPIC == "from-env"
    assert cfg.DICTIONARY_PATH == Path("/tmp/other.txt")


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS
    assert result["NOTIFY_ENABLED"] == cfg.NOTIFY_ENABLED


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NOTIFY_WORDS_PER_GROUP=7)
    assert errors == {}
    assert cfg.NOTIFY_WORDS_PER_GROUP == 7


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_string_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NTFY_TOPIC="test-topic")
    assert errors == {}
    assert cfg.NTFY_TOPIC == "test-topic"


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, NOTIFY_ENABLED=True, NTFY_TOPIC="multi")
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.NOTIFY_ENABLED is True
    assert cfg.NTFY_TOPIC == "multi"


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PORT=8000)
    assert "PORT" in errors
    assert cfg.PORT != 8000


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_bad_values_rejected():
    cfg = _fresh_settings()
    original = cfg.MAX_RESULTS
    errors = update_settings(cfg, MAX_RESULTS="lots")
    assert "MAX_RESULTS" in errors
    errors = update_settings(cfg, MAX_RESULTS=-1)
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == original


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25
