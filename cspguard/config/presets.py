"""Named policy presets loaded from YAML."""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml

from cspguard.config.loader import get_settings
from cspguard.policy.model import Disposition, Policy

logger = structlog.get_logger()

# Cache loaded presets
_presets: dict | None = None


def load_presets(path: str | Path | None = None) -> dict:
    """Load policy presets from YAML, caching after first load."""
    global _presets
    if _presets is not None:
        return _presets
    preset_path = Path(path or get_settings().presets_file)
    if not preset_path.exists():
        logger.error("policy_presets_not_found", path=str(preset_path))
        _presets = {}
        return _presets
    with open(preset_path) as f:
        _presets = yaml.safe_load(f) or {}
    return _presets


def reset_presets_cache() -> None:
    """Reset the presets cache (for testing)."""
    global _presets
    _presets = None


def get_preset(name: str) -> Policy:
    """Parse the preset called ``name`` into a Policy.

    Raises KeyError for an unknown preset and a DirectiveError if the
    preset's policy string does not parse.
    """
    presets = load_presets()
    if name not in presets:
        logger.warning("preset_not_found", preset=name, available=sorted(presets))
        raise KeyError(name)
    entry = presets[name] or {}
    disposition = Disposition(entry.get("disposition", Disposition.enforce.value))
    return Policy.parse(
        entry.get("policy", ""),
        disposition,
        duplicates=get_settings().duplicate_directives,
    )
