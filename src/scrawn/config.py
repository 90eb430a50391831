from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from .errors import ScrawnConfigError

DEFAULT_PRETTY_INDENT = 2
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Config:
    pretty_indent: int = DEFAULT_PRETTY_INDENT
    debug: bool = False
    log_level: str = "INFO"

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level, logging.INFO)


_ENV_PREFIX = "SCRAWN_"


def _find_pyproject(start_dir: Path) -> Path | None:
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        import tomllib  # py311+
    except ModuleNotFoundError:
        import tomli as tomllib

    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ScrawnConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    return default


def _to_level(value: Any, default: str) -> str:
    normalized = str(value).strip().upper()
    return normalized if normalized in _LOG_LEVELS else default


def _from_sources(raw: Dict[str, Any]) -> Config:
    pretty_indent = _to_int(
        os.getenv(f"{_ENV_PREFIX}PRETTY_INDENT", raw.get("pretty_indent", DEFAULT_PRETTY_INDENT)),
        DEFAULT_PRETTY_INDENT,
    )
    debug = _to_bool(os.getenv(f"{_ENV_PREFIX}DEBUG", raw.get("debug", False)), False)
    log_level = _to_level(os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", raw.get("log_level", "INFO")), "INFO")

    return Config(
        pretty_indent=max(0, pretty_indent),
        debug=debug,
        log_level=log_level,
    )


@lru_cache(maxsize=32)
def load_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    root = Path(start_dir or os.getcwd()).resolve()
    pyproject = _find_pyproject(root)
    if pyproject is None:
        return _from_sources({})

    parsed = _load_toml(pyproject)
    tool = parsed.get("tool", {}) if isinstance(parsed, dict) else {}
    scrawn = tool.get("scrawn", {}) if isinstance(tool, dict) else {}
    return _from_sources(scrawn if isinstance(scrawn, dict) else {})


def get_config() -> Config:
    return load_config(os.getcwd())


def refresh_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    load_config.cache_clear()
    return load_config(start_dir)
