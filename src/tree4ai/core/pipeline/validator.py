from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline, converting the merged configuration
dictionary into a frozen RenderConfig. Handles type coercion and default
value injection so the pipeline never sees malformed limits or flags.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from tree4ai.domain.config import RenderConfig, get_default_config

logger = logging.getLogger(__name__)

_BOOL_FIELDS = (
    "use_git", "include_ignored", "hide_secrets",
    "include_assets", "include_binaries", "header", "json_output",
)
_LIMIT_FIELDS = ("max_depth", "max_files")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[RenderConfig, List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[RenderConfig, List[str]]: The frozen configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return RenderConfig(**defaults), warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    unknown = sorted(k for k in config if k not in defaults)
    if unknown:
        warnings.append(f"Unknown configuration keys ignored: {', '.join(unknown)}.")

    merged["root"] = _as_optional_str(merged.get("root"), "root", warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in _LIMIT_FIELDS:
        merged[field] = _as_limit(merged.get(field), field, warnings, strict)

    return RenderConfig(**merged), warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, int) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_limit(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """
    Normalize a non-negative integer limit. None means unbounded.

    Negative or non-numeric values fall back to unbounded with a warning.
    """
    if value is None:
        return None

    number: Optional[int] = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, str) and not strict:
        try:
            number = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
        except ValueError:
            number = None

    if number is None or number < 0:
        msg = f"Invalid field '{field}': expected a non-negative integer, received {value!r}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Limit disabled.")
        return None
    return number
