from dbpedia_loader.config import (
    DEFAULT_ABSTRACT_PATH,
    DEFAULT_ABSTRACT_URL,
    Settings,
)


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("LOADER_ABSTRACT_URL", "LOADER_ABSTRACT_PATH", "LOADER_BUFFER_SIZE", "LOADER_LANGUAGE", "LOADER_INSTANCE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.abstract_url == DEFAULT_ABSTRACT_URL
    assert settings.abstract_path == DEFAULT_ABSTRACT_PATH
    assert settings.buffer_size == 1000
    assert settings.language == "en"
    assert settings.instance_url is None
    assert settings.request_timeout == 600.0


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOADER_BUFFER_SIZE", "250")
    monkeypatch.setenv("LOADER_LANGUAGE", "fr")
    monkeypatch.setenv("LOADER_INDEX_NAME", "wiki_fr")

    settings = Settings()

    assert settings.buffer_size == 250
    assert settings.language == "fr"
    assert settings.index_name == "wiki_fr"


def test_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOADER_INSTANCE_URL", raising=False)
    (tmp_path / ".env").write_text("LOADER_INSTANCE_URL=http://oss.local:9090\n", encoding="utf-8")

    assert Settings().instance_url == "http://oss.local:9090"
