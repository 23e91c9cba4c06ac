"""Language profiles module.

Provides the closed set of grapheme -> consonant-class profiles and the
ordered auto-detection used to pick one per analysis:

    pie, sanskrit, ancient_greek, albanian, turkish, german -> latin (default)

Usage:
    from sevenvoices.profiles import choose_profile

    profile = choose_profile("study")            # GermanProfile ("st")
    profile = choose_profile("study", "latin")   # explicit override
    profile.classify("mag")                      # ConsonantClass.NASAL
"""

import logging
from typing import Optional

from .base import LanguageProfile, FALLBACK_CLASS
from .classical import AncientGreekProfile, PIEProfile, SanskritProfile
from .european import AlbanianProfile, GermanProfile, LatinProfile, TurkishProfile

logger = logging.getLogger(__name__)

AUTO = "auto"

DEFAULT_PROFILE: LanguageProfile = LatinProfile()

# Detection order: first match wins
PROFILES: tuple[LanguageProfile, ...] = (
    PIEProfile(),
    SanskritProfile(),
    AncientGreekProfile(),
    AlbanianProfile(),
    TurkishProfile(),
    GermanProfile(),
    DEFAULT_PROFILE,
)

_BY_ID: dict[str, LanguageProfile] = {p.id: p for p in PROFILES}


def list_profiles() -> list[str]:
    """List profile ids in detection order."""
    return [p.id for p in PROFILES]


def get_profile(profile_id: str) -> LanguageProfile:
    """Get a profile by id.

    Raises:
        ValueError: Unknown profile id.
    """
    if profile_id not in _BY_ID:
        raise ValueError(
            f"Unknown profile: {profile_id}. Available: {list_profiles()}"
        )
    return _BY_ID[profile_id]


def detect_profile(word: str) -> LanguageProfile:
    """First profile whose detector matches the word, else the default."""
    for profile in PROFILES:
        if profile.detect(word):
            return profile
    return DEFAULT_PROFILE


def choose_profile(word: str, profile_id: Optional[str] = None) -> LanguageProfile:
    """Pick the profile for one analysis.

    Args:
        word: Raw word.
        profile_id: Explicit profile id, "auto" or None.

    Returns:
        The requested profile, or the detected one when no id is given or
        the id is unknown.
    """
    if profile_id and profile_id != AUTO:
        if profile_id in _BY_ID:
            return _BY_ID[profile_id]
        logger.warning("Unknown profile %r, falling back to detection", profile_id)
    profile = detect_profile(word)
    logger.debug("Profile for %r: %s", word, profile.id)
    return profile


__all__ = [
    "AUTO",
    "DEFAULT_PROFILE",
    "FALLBACK_CLASS",
    "LanguageProfile",
    "PROFILES",
    "AlbanianProfile",
    "AncientGreekProfile",
    "GermanProfile",
    "LatinProfile",
    "PIEProfile",
    "SanskritProfile",
    "TurkishProfile",
    "choose_profile",
    "detect_profile",
    "get_profile",
    "list_profiles",
]
