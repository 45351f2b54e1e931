from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".aoeu" / "settings.yaml"


@dataclass(frozen=True)
class TutorSettings:
    words_per_lesson: int = 100
    remap_from_qwerty: bool = True
    seed: Optional[int] = None


def load_settings(path: Optional[Path] = None) -> TutorSettings:
    """Read optional user settings. ~/.aoeu/settings.yaml is never written to.

    A missing, unreadable or unparsable file falls back to the defaults;
    a parsable file with bad values is an error.
    """
    settings_path = path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        return TutorSettings()
    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load settings from %s: %s", settings_path, e)
        return TutorSettings()
    if raw is None:
        return TutorSettings()
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a mapping of settings")

    defaults = TutorSettings()
    unknown = sorted(set(raw) - {"words_per_lesson", "remap_from_qwerty", "seed"})
    if unknown:
        logger.warning("Ignoring unknown settings in %s: %s", settings_path, ", ".join(unknown))

    words = raw.get("words_per_lesson", defaults.words_per_lesson)
    if isinstance(words, bool) or not isinstance(words, int) or words < 1:
        raise ValueError(f"{settings_path.name}: 'words_per_lesson' must be a positive integer")
    remap = raw.get("remap_from_qwerty", defaults.remap_from_qwerty)
    if not isinstance(remap, bool):
        raise ValueError(f"{settings_path.name}: 'remap_from_qwerty' must be true or false")
    seed = raw.get("seed", defaults.seed)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"{settings_path.name}: 'seed' must be an integer")

    return TutorSettings(words_per_lesson=words, remap_from_qwerty=remap, seed=seed)
