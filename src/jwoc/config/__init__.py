from jwoc.config.loader import (
    CONFIG_PATH_ENVS,
    decode_document,
    default_config_candidates,
    ensure_default_config_exists,
    load_config,
    parse_document_file,
    save_config,
)
from jwoc.config.models import (
    ClientConfig,
    ConfigInput,
    ProfileConfig,
    ResolvedConfig,
)

__all__ = [
    "CONFIG_PATH_ENVS",
    "ClientConfig",
    "ConfigInput",
    "ProfileConfig",
    "ResolvedConfig",
    "decode_document",
    "default_config_candidates",
    "ensure_default_config_exists",
    "load_config",
    "parse_document_file",
    "save_config",
]
