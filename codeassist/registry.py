"""Language profile registry and TOML configuration loader.

Loads language and task profiles from profiles.toml. The resulting
mapping is treated as a read-only lookup and handed to the pipeline.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import ValidationError

from codeassist.schemas.context import Language
from codeassist.schemas.profile import LanguageProfile

# Default config directory relative to the codeassist package
_CONFIG_DIR = Path(__file__).parent / "config"


def load_profiles(config_path: Path | None = None) -> dict[Language, LanguageProfile]:
    """Load language profiles from a TOML file.

    Args:
        config_path: Path to profiles.toml. Defaults to codeassist/config/profiles.toml.

    Returns:
        Dictionary mapping each configured Language to its profile.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the TOML structure is invalid.
    """
    path = config_path or _CONFIG_DIR / "profiles.toml"
    if not path.exists():
        raise FileNotFoundError(f"Profile config not found: {path}")

    with open(path, "rb") as f:
        raw = tomllib.load(f)

    languages_section = raw.get("languages")
    if not languages_section or not isinstance(languages_section, dict):
        raise ValueError(f"No [languages] section found in {path}")

    profiles: dict[Language, LanguageProfile] = {}
    for key, entry in languages_section.items():
        if not isinstance(entry, dict):
            continue
        try:
            profile = LanguageProfile(**entry)
        except ValidationError as e:
            raise ValueError(f"Invalid profile '{key}' in {path}: {e}") from e
        profiles[profile.language] = profile

    return profiles


def get_profile(
    profiles: dict[Language, LanguageProfile], language: Language | None
) -> LanguageProfile | None:
    """Look up the profile for a language, or None if it is not configured."""
    if language is None:
        return None
    return profiles.get(language)
