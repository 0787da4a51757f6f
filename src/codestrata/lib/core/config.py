# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root
from .paths import state_root as _state_root_base

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "master"

_TRUTHY = {"1", "true", "yes", "on"}


# ---------- Global config ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If STRATA_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        0) $STRATA_CONFIG_DIR/config.yml, when that variable is set
        1) ${XDG_CONFIG_HOME:-~/.config}/codestrata/config.yml
        2) sys.prefix/etc/codestrata/config.yml
        3) /etc/codestrata/config.yml
    """
    env_file = os.environ.get("STRATA_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (
        (Path(xdg_home) if xdg_home else Path.home() / ".config") / "codestrata" / "config.yml"
    )
    sp_cfg = Path(sys.prefix) / "etc" / "codestrata" / "config.yml"
    etc_cfg = Path("/etc/codestrata/config.yml")
    candidates = [user_cfg, sp_cfg, etc_cfg]
    if os.environ.get("STRATA_CONFIG_DIR"):
        candidates.insert(0, config_root() / "config.yml")
    return candidates


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    Resolution order (first existing wins, except explicit override is returned even
    if missing to make intent visible to the user):
    - STRATA_CONFIG_FILE env (returned as-is)
    - ${XDG_CONFIG_HOME:-~/.config}/codestrata/config.yml (user override)
    - sys.prefix/etc/codestrata/config.yml (pip wheels)
    - /etc/codestrata/config.yml (system default)
    If none exist, return the last path (/etc/codestrata/config.yml).
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError:
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``git: "oops"``),
    returns ``{}`` to avoid ``AttributeError`` in callers that expect ``.get()``.
    """
    cfg = load_global_config()
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Path resolution ----------


def _resolve_path(
    env_var: str | None,
    config_key: tuple[str, str] | None,
    default: Callable[[], Path],
) -> Path:
    """Resolve a path: env var → global config → computed default."""
    if env_var:
        env = os.environ.get(env_var)
        if env:
            return Path(env).expanduser().resolve()

    if config_key:
        try:
            section = get_global_section(config_key[0])
            val = section.get(config_key[1])
            if val:
                return Path(val).expanduser().resolve()
        except (OSError, KeyError, TypeError, yaml.YAMLError):
            pass

    return default().resolve()


def state_root() -> Path:
    """Writable state directory (debug log).

    Precedence:
    - Environment variable STRATA_STATE_DIR (handled first)
    - If set in global config (paths.state_root), use it.
    - Otherwise, use codestrata.lib.core.paths.state_root() (FHS/XDG handling).
    """
    return _resolve_path("STRATA_STATE_DIR", ("paths", "state_root"), _state_root_base)


def log_path() -> Path:
    """Return the debug log location under the state root."""
    return state_root() / "strata.log"


# ---------- Settings ----------


def get_git_binary() -> str:
    """Return git.binary from global config, defaulting to ``git``."""
    return str(get_global_section("git").get("binary") or "git")


def get_default_remote() -> str:
    """Return defaults.remote from global config, defaulting to ``origin``."""
    return str(get_global_section("defaults").get("remote") or DEFAULT_REMOTE)


def get_default_branch() -> str:
    """Return defaults.branch from global config, defaulting to ``master``."""
    return str(get_global_section("defaults").get("branch") or DEFAULT_BRANCH)


def get_lenient_exit() -> bool:
    """Return whether failures should still exit with status 0.

    ``STRATA_LENIENT_EXIT`` wins over ``cli.lenient_exit`` in the global config.
    """
    env = os.environ.get("STRATA_LENIENT_EXIT")
    if env is not None:
        return env.strip().lower() in _TRUTHY
    return bool(get_global_section("cli").get("lenient_exit", False))
