"""Process-wide configuration snapshot.

Comparators read default tolerances and the diagnostic line cap from a single
immutable :class:`AssertConfig`.  The snapshot is replaced as a whole, never
mutated in place, and any comparator argument passed explicitly wins over it.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from assertkit.core.constants import (
    DEFAULT_ABSOLUTE_TOL,
    DEFAULT_CONFIG_FILE,
    DEFAULT_RELATIVE_TOL,
    MAX_OUTPUT_LINES,
)
from assertkit.types import ComparisonTolerance, ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssertConfig:
    """Global comparator configuration."""

    absolute_tol: float = DEFAULT_ABSOLUTE_TOL
    relative_tol: float = DEFAULT_RELATIVE_TOL
    max_output_lines: int = MAX_OUTPUT_LINES

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ConfigError: If a tolerance is negative or NaN, or the line cap is
                not a non-negative integer.
        """
        for name in ("absolute_tol", "relative_tol"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {type(value).__name__}")
            if math.isnan(value) or value < 0:
                raise ConfigError(f"{name} must be >= 0, got {value}")
        cap = self.max_output_lines
        if isinstance(cap, bool) or not isinstance(cap, int) or cap < 0:
            raise ConfigError(f"max_output_lines must be a non-negative integer, got {cap!r}")

    @property
    def tolerance(self) -> ComparisonTolerance:
        return ComparisonTolerance(absolute=self.absolute_tol, relative=self.relative_tol)


_config_lock = threading.Lock()
_global_config: Optional[AssertConfig] = None


def get_config() -> AssertConfig:
    """Return the active configuration snapshot."""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        if _global_config is None:
            _global_config = AssertConfig()
        return _global_config


def set_config(
    absolute_tol: float = None,
    relative_tol: float = None,
    max_output_lines: int = None,
) -> AssertConfig:
    """Replace the active snapshot, keeping values whose argument is ``None``.

    Example:
        set_config(absolute_tol=1e-6)
        set_config(max_output_lines=20)
    """
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        current = _global_config or AssertConfig()

        updates = {
            "absolute_tol": absolute_tol,
            "relative_tol": relative_tol,
            "max_output_lines": max_output_lines,
        }
        new_config = replace(current, **{k: v for k, v in updates.items() if v is not None})
        new_config.validate()
        _global_config = new_config

    logger.debug("Configuration updated: %s", new_config)
    return new_config


def reset_config() -> AssertConfig:
    """Restore the built-in defaults."""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        _global_config = AssertConfig()
        return _global_config


def load_config(path: str | Path = DEFAULT_CONFIG_FILE, apply: bool = True) -> AssertConfig:
    """Load a configuration snapshot from a YAML file.

    The file holds a mapping with any of ``absolute_tol``, ``relative_tol`` and
    ``max_output_lines``; missing keys take the built-in defaults.

    Args:
        path: Path to the YAML file.
        apply: Install the loaded snapshot as the active configuration.

    Returns:
        The parsed :class:`AssertConfig`.

    Raises:
        ConfigError: If the file is missing, malformed or holds invalid values.
    """
    global _global_config  # pylint: disable=global-statement
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")

    try:
        with open(p, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    known = {f.name for f in fields(AssertConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {p}: {', '.join(map(str, unknown))}")

    # PyYAML reads exponent forms without a dot (``1e-4``) as strings
    for name in ("absolute_tol", "relative_tol"):
        if isinstance(data.get(name), str):
            try:
                data[name] = float(data[name])
            except ValueError as exc:
                raise ConfigError(f"{name} must be a number, got {data[name]!r}") from exc

    config = AssertConfig(**data)
    config.validate()

    if apply:
        with _config_lock:
            _global_config = config
    logger.info("Loaded configuration from %s", p)
    return config
