import json

import pytest

from linkunwrap.infra.config import ConfigAdapter
from linkunwrap.infra.config.file_io import (
    find_config_file,
    init_config,
    load_config,
)

DISABLE_VK_TOML = "[general]\ndisabled_hosts = ['vk.com']\n"
DISABLE_VK = {"general": {"disabled_hosts": ["vk.com"]}}


@pytest.fixture
def user_settings(tmp_path, monkeypatch):
    """Point the per-user settings file into tmp_path and run from an empty cwd."""
    path = tmp_path / "user" / "settings.toml"
    monkeypatch.setattr("linkunwrap.infra.config.file_io.SETTING_PATH", path)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return path


# ================================================================
# lookup order
# ================================================================


def test_no_settings_anywhere_gives_defaults(user_settings):
    assert find_config_file() is None
    assert load_config() == {}
    assert ConfigAdapter(load_config()).get_resolver_config().disabled_hosts == ()


def test_user_settings_file_is_the_fallback(user_settings):
    user_settings.parent.mkdir(parents=True)
    user_settings.write_text(DISABLE_VK_TOML, encoding="utf-8")

    assert find_config_file() == user_settings
    assert load_config() == DISABLE_VK


def test_working_directory_toml_wins_over_user_file(user_settings):
    user_settings.parent.mkdir(parents=True)
    user_settings.write_text("[general]\ndisabled_hosts = ['twitter.com']\n")
    (user_settings.parents[1] / "work" / "settings.toml").write_text(DISABLE_VK_TOML)

    assert load_config() == DISABLE_VK


def test_working_directory_json(user_settings):
    local = user_settings.parents[1] / "work" / "settings.json"
    local.write_text(json.dumps(DISABLE_VK), encoding="utf-8")

    assert find_config_file() == local.resolve()
    assert load_config() == DISABLE_VK


def test_explicit_path_skips_lookup(user_settings, tmp_path):
    (user_settings.parents[1] / "work" / "settings.toml").write_text("[general]\n")
    explicit = tmp_path / "custom.toml"
    explicit.write_text(DISABLE_VK_TOML, encoding="utf-8")

    assert load_config(explicit) == DISABLE_VK


def test_missing_explicit_path_raises(user_settings, tmp_path):
    user_settings.parent.mkdir(parents=True)
    user_settings.write_text(DISABLE_VK_TOML, encoding="utf-8")

    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.toml")


# ================================================================
# parse errors
# ================================================================


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("bad.toml", "disabled_hosts = [1,,2]", "Invalid TOML in"),
        ("bad.json", "{ not json", "Invalid JSON in"),
        ("settings.yaml", "general: {}", "Unsupported settings file extension"),
        ("list.json", "[1, 2]", "Settings root must be a table"),
    ],
)
def test_unreadable_settings(tmp_path, name, content, message):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError) as exc:
        load_config(path)
    assert message in str(exc.value)


# ================================================================
# init_config
# ================================================================


def test_init_config_writes_sample_to_user_file(user_settings):
    path = init_config()

    assert path == user_settings
    cfg = load_config()
    assert cfg["general"]["disabled_hosts"] == []
    assert ConfigAdapter(cfg).get_log_config().log_level == "INFO"


def test_init_config_refuses_to_overwrite(tmp_path):
    target = tmp_path / "settings.toml"
    target.write_text(DISABLE_VK_TOML, encoding="utf-8")

    with pytest.raises(FileExistsError):
        init_config(target)
    assert target.read_text(encoding="utf-8") == DISABLE_VK_TOML


def test_init_config_overwrite(tmp_path):
    target = tmp_path / "nested" / "settings.toml"
    init_config(target)
    target.write_text(DISABLE_VK_TOML, encoding="utf-8")

    init_config(target, overwrite=True)
    assert load_config(target)["general"]["disabled_hosts"] == []
