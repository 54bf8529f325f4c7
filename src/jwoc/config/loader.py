from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
import yaml
from pydantic import ValidationError

from jwoc.config.models import ClientConfig, ConfigInput, ProfileConfig, ResolvedConfig
from jwoc.constants import DEFAULT_CONFIG_DIR
from jwoc.errors import ConfigError

CONFIG_PATH_ENVS = ("JWOC_CONFIG", "JWOC_CONFIG_FILE")


def _default_config_dir() -> Path:
    return Path(DEFAULT_CONFIG_DIR).expanduser()


def default_config_candidates() -> list[Path]:
    base = _default_config_dir()
    return [
        base / "config.yml",
        base / "config.yaml",
        base / "config.toml",
        base / "config.json",
    ]


def decode_document(raw: str, *, suffix: str) -> dict[str, Any]:
    """Decode a yaml/json/toml document into a mapping, keyed on file suffix."""

    if suffix in {".yaml", ".yml", ""}:
        parsed = yaml.safe_load(raw) or {}
    elif suffix == ".json":
        parsed = json.loads(raw)
    elif suffix == ".toml":
        parsed = tomllib.loads(raw)
    else:
        raise ConfigError(f"unsupported file extension: {suffix} (expected yaml/json/toml)")

    if not isinstance(parsed, dict):
        raise ConfigError("document must decode to an object/map")
    return parsed


def parse_document_file(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
        return decode_document(raw, suffix=path.suffix.lower())
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to parse file '{path}': {exc}") from exc


def ensure_default_config_exists(path: Path | None = None) -> Path:
    target = path or default_config_candidates()[0]
    target = target.expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    if target.exists():
        return target.resolve()

    default = ClientConfig(default_profile="default", profiles={"default": ProfileConfig()})
    save_config(default, path=target)
    return target.resolve()


def _load_from_path(path: Path, *, source: str) -> ResolvedConfig:
    payload = parse_document_file(path)
    try:
        data = ClientConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config structure for '{path}': {exc}") from exc

    return ResolvedConfig(source=source, path=path.resolve(), data=data)


def load_config(
    config: ConfigInput | str | Path | None = None,
    *,
    config_path: str | Path | None = None,
) -> ResolvedConfig:
    """Load and validate client configuration with precedence.

    Runtime objects win over an explicit path, which wins over the
    ``JWOC_CONFIG`` environment variables, which win over the default
    config directory.
    """

    if isinstance(config, (str, Path)) and config_path is None:
        config_path = config
        config = None

    if config is not None:
        if isinstance(config, ClientConfig):
            return ResolvedConfig(source="runtime-model", data=config)
        try:
            return ResolvedConfig(source="runtime-dict", data=ClientConfig.model_validate(config))
        except ValidationError as exc:
            raise ConfigError(f"invalid runtime config: {exc}") from exc

    if config_path is not None:
        path = Path(config_path).expanduser().resolve()
        if not path.exists():
            return ResolvedConfig(source="explicit-path-missing", path=path, data=ClientConfig())
        return _load_from_path(path, source="explicit-path")

    for env_name in CONFIG_PATH_ENVS:
        env_path = os.getenv(env_name)
        if not env_path:
            continue
        path = Path(env_path).expanduser().resolve()
        if not path.exists():
            return ResolvedConfig(source=f"env:{env_name}:missing", path=path, data=ClientConfig())
        return _load_from_path(path, source=f"env:{env_name}")

    for candidate in default_config_candidates():
        if candidate.exists():
            return _load_from_path(candidate.expanduser().resolve(), source="default-path")

    return ResolvedConfig(
        source="default-empty",
        path=default_config_candidates()[0].expanduser().resolve(),
        data=ClientConfig(),
    )


def save_config(config: ClientConfig, *, path: Path | None = None) -> Path:
    target = (path or default_config_candidates()[0]).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    suffix = target.suffix.lower()

    payload = config.model_dump(mode="json", by_alias=True, exclude_none=True)
    if suffix in {"", ".yaml", ".yml"}:
        rendered = yaml.safe_dump(payload, sort_keys=False)
    elif suffix == ".json":
        rendered = json.dumps(payload, indent=2) + "\n"
    elif suffix == ".toml":
        rendered = tomli_w.dumps(payload)
    else:
        raise ConfigError(f"unsupported config extension: {suffix}")

    target.write_text(rendered, encoding="utf-8")
    # The file may carry a session cookie.
    target.chmod(0o600)
    return target.resolve()
