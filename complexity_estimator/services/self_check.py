"""Built-in reference snippets and their self-check run."""

from typing import Dict, List

from ..schemas import SelfCheckCase, SelfCheckReport
from .analyzer import analyze


REFERENCE_SNIPPETS: List[Dict[str, str]] = [
    {
        "name": "Python Recursion",
        "code": """def proc(n):
    if n<=1:
        return 1
    else:
        return proc(n/3) + n + proc(n/3)""",
        "expected": "O(n^0.6309)",
    },
    {
        "name": "C Nested Loops",
        "code": """#include <stdio.h>
int main() {
    for(i=1; i <=n ; i=i*3)
    {
        j=n;
        while(j>=1)
        {
             j=j-2;
        }
    }
}""",
        "expected": "O(n log n)",
    },
    {
        "name": "Python Permutations",
        "code": """import itertools

def example_function(n):
    for i in range(n):
        for j in range(n):
            _ = i + j
    permutations = list(itertools.permutations(range(n)))
    for p in permutations:
        _ = sum(p)""",
        "expected": "O(n!)",
    },
]


def run_self_check() -> SelfCheckReport:
    """
    Runs every reference snippet through the engine.

    A case passes when its expected Big-O text occurs in the reported time
    complexity.
    """
    cases = []
    for snippet in REFERENCE_SNIPPETS:
        actual = analyze(snippet["code"]).time_complexity.upper_bound
        cases.append(
            SelfCheckCase(
                name=snippet["name"],
                expected=snippet["expected"],
                actual=actual,
                passed=snippet["expected"] in actual,
            )
        )

    return SelfCheckReport(
        passed=sum(1 for case in cases if case.passed),
        total=len(cases),
        cases=cases,
    )
