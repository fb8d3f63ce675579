from pathlib import Path

import pytest

from fireconfig.core.errors import ConfigError
from fireconfig.sdk.config import SdkConfig, load_config, merge_cli_overrides


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("FIRECONFIG_PROJECT_ID", "GOOGLE_CLOUD_PROJECT", "GCLOUD_PROJECT", "FIRECONFIG_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_file(tmp_path: Path):
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg == SdkConfig()


def test_file_values(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[fireconfig]\nproject_id = "from-file"\ntimeout = 15\n'
        'default_output_format = "yaml"\ndefault_output_dir = "~/rc"\n',
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.project_id == "from-file"
    assert cfg.timeout == 15
    assert cfg.default_output_format == "yaml"
    assert cfg.default_output_dir == Path("~/rc").expanduser()


def test_env_overrides_file(tmp_path: Path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('project_id = "from-file"\n', encoding="utf-8")
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "from-env")
    monkeypatch.setenv("FIRECONFIG_TIMEOUT", "7")
    cfg = load_config(path)
    assert cfg.project_id == "from-env"
    assert cfg.timeout == 7


def test_explicit_env_var_wins(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GCLOUD_PROJECT", "gcloud")
    monkeypatch.setenv("FIRECONFIG_PROJECT_ID", "explicit")
    assert load_config(tmp_path / "none.toml").project_id == "explicit"


def test_invalid_values(tmp_path: Path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('default_output_format = "xml"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)

    monkeypatch.setenv("FIRECONFIG_TIMEOUT", "soon")
    with pytest.raises(ConfigError):
        load_config(tmp_path / "none.toml")


def test_broken_toml(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("project_id = ", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_merge_cli_overrides():
    base = SdkConfig(project_id="a")
    merged = merge_cli_overrides(base, project_id="b", timeout=3, output_format="yaml")
    assert (merged.project_id, merged.timeout, merged.default_output_format) == ("b", 3, "yaml")
    assert base.project_id == "a"
    assert merge_cli_overrides(base) == base

    with pytest.raises(ConfigError):
        merge_cli_overrides(base, output_format="csv")
    with pytest.raises(ConfigError):
        merge_cli_overrides(base, timeout=0)
