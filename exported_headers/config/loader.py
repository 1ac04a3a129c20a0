# exported_headers/config/loader.py
"""
Loads collector settings from TOML files in the working directory.
"""
import toml
from pathlib import Path
from typing import Any, Dict, Optional
import structlog

from exported_headers.exceptions import ConfigError

from .settings import OutputFormat

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".exported-headers.toml", "exported-headers.toml", "pyproject.toml"]
PYPROJECT_TOOL_KEY = "exported-headers"

CONFIG_KEY_TO_COLLECTORCONFIG_ATTR_MAP: Dict[str, str] = {
    "header_dirs": "header_dirs",
    "root_dir": "root_dir",
    "output_format": "output_format",
    "show_summary": "show_summary",
}

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file():
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"could not read config file {file_path}: {e}") from e
    if file_path.name == "pyproject.toml":
        return data.get("tool", {}).get(PYPROJECT_TOOL_KEY, {})
    return data

def load_project_config(search_dir: Optional[Path] = None) -> Dict[str, Any]:
    # returns the settings of the first config file that defines any.
    base = search_dir if search_dir is not None else Path.cwd()
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = base / filename
        settings = _load_toml_file_data(candidate)
        if settings:
            log.info("loading_project_local_config", path=str(candidate))
            return settings
    log.debug("no_configuration_files_loaded", search_dir=str(base))
    return {}

def resolve_config_options(raw_config: Dict[str, Any], profile_name: Optional[str] = None) -> Dict[str, Any]:
    # flattens file settings and an optional profile into CollectorConfig kwargs.
    options: Dict[str, Any] = {}
    for toml_key, attr in CONFIG_KEY_TO_COLLECTORCONFIG_ATTR_MAP.items():
        if toml_key in raw_config:
            options[attr] = raw_config[toml_key]

    if profile_name:
        profiles = raw_config.get("profiles", {})
        if not isinstance(profiles, dict) or profile_name not in profiles:
            raise ConfigError(f"profile '{profile_name}' not found in configuration")
        log.info("applying_profile_settings", profile=profile_name)
        for toml_key, attr in CONFIG_KEY_TO_COLLECTORCONFIG_ATTR_MAP.items():
            if toml_key in profiles[profile_name]:
                options[attr] = profiles[profile_name][toml_key]

    return _coerce_options(options)

def _coerce_options(options: Dict[str, Any]) -> Dict[str, Any]:
    # converts raw TOML values into the types CollectorConfig expects.
    coerced = dict(options)
    if "header_dirs" in coerced:
        dirs = coerced["header_dirs"]
        if isinstance(dirs, str):
            dirs = [dirs]
        if not isinstance(dirs, list) or not all(isinstance(d, str) for d in dirs):
            raise ConfigError("'header_dirs' must be a list of paths")
        coerced["header_dirs"] = [Path(d) for d in dirs]
    if "root_dir" in coerced:
        if not isinstance(coerced["root_dir"], str):
            raise ConfigError("'root_dir' must be a path")
        coerced["root_dir"] = Path(coerced["root_dir"]) if coerced["root_dir"] else None
    if "output_format" in coerced:
        fmt = OutputFormat.from_string(coerced["output_format"]) if isinstance(coerced["output_format"], str) else None
        if fmt is None:
            raise ConfigError(f"invalid 'output_format': {coerced['output_format']!r}")
        coerced["output_format"] = fmt
    if "show_summary" in coerced and not isinstance(coerced["show_summary"], bool):
        raise ConfigError("'show_summary' must be true or false")
    return coerced
