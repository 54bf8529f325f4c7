from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from jwoc.config import (
    ClientConfig,
    ProfileConfig,
    default_config_candidates,
    ensure_default_config_exists,
    load_config,
    save_config,
)
from jwoc.errors import ConfigError


def test_runtime_dict_precedence_over_paths(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(
        yaml.safe_dump({"default_profile": "file", "profiles": {"file": {"base_url": "https://file.example"}}}),
        encoding="utf-8",
    )

    cfg = load_config(
        {"default_profile": "runtime", "profiles": {"runtime": {"base_url": "https://runtime.example"}}},
        config_path=path,
    )

    assert cfg.source == "runtime-dict"
    assert cfg.data.default_profile == "runtime"


def test_explicit_path_precedence_over_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / "env.json"
    env_path.write_text(
        json.dumps({"default_profile": "env", "profiles": {"env": {"base_url": "https://env.example"}}}),
        encoding="utf-8",
    )

    explicit_path = tmp_path / "explicit.toml"
    explicit_path.write_text(
        'default_profile = "explicit"\n[profiles.explicit]\nbase_url = "https://explicit.example"\n',
        encoding="utf-8",
    )

    monkeypatch.setenv("JWOC_CONFIG", str(env_path))
    cfg = load_config(config_path=explicit_path)

    assert cfg.source == "explicit-path"
    assert cfg.data.default_profile == "explicit"
    assert cfg.data.profiles["explicit"].base_url == "https://explicit.example"


def test_env_path_used_when_no_explicit_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / "env.json"
    env_path.write_text(json.dumps({"defaultProfile": "env", "profiles": {"env": {"baseUrl": "https://env.example"}}}))
    monkeypatch.setenv("JWOC_CONFIG", str(env_path))

    cfg = load_config()

    assert cfg.source == "env:JWOC_CONFIG"
    assert cfg.data.default_profile == "env"
    assert cfg.data.profiles["env"].base_url == "https://env.example"


def test_missing_config_falls_back_to_defaults() -> None:
    cfg = load_config()
    assert cfg.source == "default-empty"
    assert cfg.path == default_config_candidates()[0].expanduser().resolve()
    assert cfg.data.profiles == {}


def test_invalid_structure_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(yaml.safe_dump({"profiles": {"default": {"redirect_delay_seconds": -1}}}), encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid config structure"):
        load_config(config_path=path)


def test_unparseable_file_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="failed to parse"):
        load_config(config_path=path)


@pytest.mark.parametrize("suffix", [".yml", ".json", ".toml"])
def test_save_config_keeps_session_cookie(tmp_path: Path, suffix: str) -> None:
    target = tmp_path / f"config{suffix}"
    config = ClientConfig(
        default_profile="default",
        profiles={"default": ProfileConfig(session_cookie="s%3Asecret", redirect_delay_seconds=1.0)},
    )

    written = save_config(config, path=target)
    loaded = load_config(config_path=written)

    profile = loaded.data.profiles["default"]
    assert profile.session_cookie is not None
    assert profile.session_cookie.get_secret_value() == "s%3Asecret"
    assert profile.redirect_delay_seconds == 1.0
    assert written.stat().st_mode & 0o777 == 0o600


def test_ensure_default_config_exists_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yml"
    first = ensure_default_config_exists(target)
    target.write_text(yaml.safe_dump({"default_profile": "custom"}), encoding="utf-8")
    second = ensure_default_config_exists(target)

    assert first == second
    assert load_config(config_path=target).data.default_profile == "custom"
