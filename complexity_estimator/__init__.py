"""Complexity Estimator.

Estimates asymptotic time and space complexity of short source snippets by
pattern-matching loops, loop updates, nesting and recursive calls.

Architecture:
    - api/: FastAPI endpoints (HTTP layer)
    - domain/: Growth classification, dominance, recurrence solver, growth curves
    - infrastructure/: tree-sitter JavaScript parser and node helpers
    - scanners/: One structural scanner per language profile
    - services/: Analysis orchestration and reference self-check
    - schemas.py: Pydantic models

Usage:
    from complexity_estimator import analyze
    analyze("for (let i = 0; i < n; i++) {}").time_complexity.upper_bound
    # uvicorn complexity_estimator.main:app --reload
"""

from .services.analyzer import analyze

__version__ = "1.0.0"

__all__ = ["analyze"]
