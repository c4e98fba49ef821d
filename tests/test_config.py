from apispec_jsonschema.config import Settings


def test_strict_by_default(monkeypatch):
    monkeypatch.delenv("APISPEC_LENIENT_CONFIGURATION", raising=False)
    assert Settings(_env_file=None).lenient_configuration is False


def test_lenient_from_environment(monkeypatch):
    monkeypatch.setenv("APISPEC_LENIENT_CONFIGURATION", "true")
    assert Settings(_env_file=None).lenient_configuration is True
