import json

import pytest

from Utils.admin_config import BASE_URL_ENV_VAR, AdminConfig


@pytest.fixture(autouse=True)
def no_env_override(monkeypatch):
    monkeypatch.delenv(BASE_URL_ENV_VAR, raising=False)


def test_defaults_without_file(tmp_path):
    config = AdminConfig(config_dir=str(tmp_path))

    assert config.get_base_url() == "http://localhost:5401"
    assert config.get_request_timeout() == 15
    assert config.get_items_per_page() == 5


def test_settings_persist(tmp_path):
    config = AdminConfig(config_dir=str(tmp_path))
    config.set_base_url("http://admin.example:5401/")
    config.set_items_per_page(10)

    reloaded = AdminConfig(config_dir=str(tmp_path))

    assert reloaded.get_base_url() == "http://admin.example:5401"
    assert reloaded.get_items_per_page() == 10


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "config.json").write_text("{not json")

    config = AdminConfig(config_dir=str(tmp_path))

    assert config.get_base_url() == "http://localhost:5401"


def test_partial_file_merges_with_defaults(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"request_timeout": 30}))

    config = AdminConfig(config_dir=str(tmp_path))

    assert config.get_request_timeout() == 30
    assert config.get_items_per_page() == 5


def test_env_var_overrides_base_url(tmp_path, monkeypatch):
    monkeypatch.setenv(BASE_URL_ENV_VAR, "http://env-host:9000/")

    config = AdminConfig(config_dir=str(tmp_path))

    assert config.get_base_url() == "http://env-host:9000"


def test_items_per_page_must_be_positive(tmp_path):
    config = AdminConfig(config_dir=str(tmp_path))

    with pytest.raises(ValueError):
        config.set_items_per_page(0)
