"""
scanners
========

One structural scanner per language profile, all sharing the
``StructuralScanner`` contract. ``get_scanner`` routes unknown profiles to
the JavaScript scanner.
"""

from typing import Dict

from ..language_detector import LanguageProfile
from .base import ScanReport, StructuralScanner
from .c_scanner import CScanner
from .javascript_scanner import JavaScriptScanner
from .pascal_scanner import PascalScanner
from .python_scanner import PythonScanner


SCANNERS: Dict[LanguageProfile, StructuralScanner] = {
    LanguageProfile.C: CScanner(),
    LanguageProfile.PYTHON: PythonScanner(),
    LanguageProfile.PASCAL: PascalScanner(),
    LanguageProfile.JAVASCRIPT: JavaScriptScanner(),
}


def get_scanner(profile) -> StructuralScanner:
    return SCANNERS.get(profile, SCANNERS[LanguageProfile.JAVASCRIPT])


__all__ = [
    "ScanReport",
    "StructuralScanner",
    "CScanner",
    "JavaScriptScanner",
    "PascalScanner",
    "PythonScanner",
    "SCANNERS",
    "get_scanner",
]
