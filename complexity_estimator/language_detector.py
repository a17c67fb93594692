"""
language_detector.py - Keyword sniffing of the snippet language
===============================================================

Chooses one of the four scanning profiles. The first matching rule wins and
anything unrecognised (including garbage input) falls back to JavaScript,
whose scanner is the only one backed by a real parser.
"""

from enum import Enum


class LanguageProfile(str, Enum):
    C = "c"
    PYTHON = "python"
    PASCAL = "pascal"
    JAVASCRIPT = "javascript"


_PROFILE_MARKERS = (
    (LanguageProfile.C, ("#include", "int main", "void ")),
    (LanguageProfile.PYTHON, ("def ", "import ", "print(")),
    (LanguageProfile.PASCAL, ("program ", "begin", "end;")),
)


def detect_language(code: str) -> LanguageProfile:
    """
    Classifies a snippet into a language profile.

    Args:
        code: Raw snippet text.

    Returns:
        The first profile whose markers occur in the lowercased snippet,
        ``LanguageProfile.JAVASCRIPT`` otherwise.
    """
    normalized = code.strip().lower()
    for profile, markers in _PROFILE_MARKERS:
        if any(marker in normalized for marker in markers):
            return profile
    return LanguageProfile.JAVASCRIPT
