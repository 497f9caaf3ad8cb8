import dataclasses

import pytest

from lib.config.service_loader import DEFAULT_PORT, ServiceConfig, load_service_config


def test_defaults_from_empty_environment():
    config = load_service_config(environ={})
    assert config == ServiceConfig()
    assert config.port == DEFAULT_PORT == 3000
    assert config.validation_status == 500
    assert config.gemini_model == "gemini-pro"


def test_environment_values():
    config = load_service_config(
        environ={
            "OFFICIAL_EMAIL": "me@uni.edu",
            "GEMINI_API_KEY": "k",
            "PORT": "8080",
            "BFHL_VALIDATION_STATUS": "400",
        }
    )
    assert config.official_email == "me@uni.edu"
    assert config.gemini_api_key == "k"
    assert config.port == 8080
    assert config.validation_status == 400


def test_yaml_file_with_env_override(tmp_path):
    path = tmp_path / "service.yaml"
    path.write_text("service:\n  official_email: yaml@uni.edu\n  port: 9000\n  gemini_model: gemini-1.5-flash\n")
    config = load_service_config(str(path), environ={"PORT": "9100"})
    assert config.official_email == "yaml@uni.edu"
    assert config.gemini_model == "gemini-1.5-flash"
    assert config.port == 9100


def test_config_path_from_environment(tmp_path):
    path = tmp_path / "service.yaml"
    path.write_text("service:\n  host: 127.0.0.1\n")
    assert load_service_config(environ={"BFHL_CONFIG": str(path)}).host == "127.0.0.1"


def test_missing_yaml_file_is_ignored(tmp_path):
    assert load_service_config(str(tmp_path / "absent.yaml"), environ={}) == ServiceConfig()


@pytest.mark.parametrize(
    "environ",
    [{"PORT": "eighty"}, {"BFHL_VALIDATION_STATUS": "418"}],
)
def test_invalid_values(environ):
    with pytest.raises(ValueError):
        load_service_config(environ=environ)


def test_unknown_yaml_setting(tmp_path):
    path = tmp_path / "service.yaml"
    path.write_text("service:\n  colour: blue\n")
    with pytest.raises(ValueError, match="colour"):
        load_service_config(str(path), environ={})


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ServiceConfig().port = 1
