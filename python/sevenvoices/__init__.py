"""sevenvoices - Seven-Voices word path solver.

Reduces a word to a sequence of seven vowel archetypes ("Voices") and
searches a small space of edits of that sequence for the lowest-cost
primary path and its near-optimal frontier.

Core concepts:
    - A word's vowels give its base sequence (study -> U, I)
    - Consonants between vowels are classified per language profile
    - Candidate sequences are scored by three checksums (V, E, C)

Example:
    "study" (strict, auto profile)
    Primary: U → I, rings [1, 1], V=55, E=0, C=2

Usage:
    from sevenvoices import analyze

    result = analyze("study")
    print(result.primary.voices, result.primary.checksums)

    result = analyze("zemër", mode="open", profile="albanian")
    for path in result.frontier:
        print(path.key, path.checksums.e)
"""

__version__ = "0.1.0"

from .manifest import VoiceManifest, default_manifest
from .schema import Analysis, Path, Voice
from .scoring import InvariantViolation
from .solver import SolveOptions, analyze, solve_word

__all__ = [
    "Analysis",
    "InvariantViolation",
    "Path",
    "SolveOptions",
    "Voice",
    "VoiceManifest",
    "analyze",
    "default_manifest",
    "solve_word",
]
