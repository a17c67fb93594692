"""Pascal scanner: for-to-do loops and recursive functions."""

from complexity_estimator.domain.recurrence import ExtraWork
from complexity_estimator.scanners.pascal_scanner import PascalScanner, infer_recurrence


BINARY_SEARCH = """program Search;
function bsearch(n: integer): integer;
begin
  if n <= 1 then
    bsearch := 1
  else
    bsearch := bsearch(n div 2) + 1;
end;
begin
  for i := 1 to n do
    writeln(i);
end."""


def test_for_to_do_is_linear():
    report = PascalScanner().scan("for i := 1 to n do\n  writeln(i);")
    assert len(report.breakdown) == 1
    assert report.breakdown[0].rationale == "Pascal for loop with linear iterations"
    assert report.breakdown[0].result.upper_bound == "O(n)"


def test_keywords_are_case_insensitive():
    report = PascalScanner().scan("FOR I := 1 TO N DO\n  WRITELN(I);")
    assert report.breakdown[0].section == "For Loop"


def test_recursive_function_with_div():
    report = PascalScanner().scan(BINARY_SEARCH)
    sections = [f.section for f in report.breakdown]
    assert sections == ["For Loop", "Recursive Function"]

    recursive = report.breakdown[1]
    assert recursive.rationale == "Function bsearch with 1 recursive calls, n/2 reduction"
    assert recursive.result.upper_bound == "O(log n)"
    assert report.space_complexity.upper_bound == "O(log_2 n)"


def test_two_branches():
    code = (
        "function visit(n: integer): integer;\n"
        "begin\n"
        "  if n <= 1 then visit := 1\n"
        "  else visit := visit(n div 2) + visit(n div 2);\n"
        "end;"
    )
    params = infer_recurrence(code, "visit")
    assert (params.branching_factor, params.reduction_factor) == (2, 2)
    assert PascalScanner().scan(code).breakdown[0].result.upper_bound == "O(n^1.0000)"


def test_function_without_div_uses_unit_factors():
    code = (
        "function fact(n: integer): integer;\n"
        "begin\n"
        "  if n = 0 then fact := 1 else fact := n * fact(n - 1);\n"
        "end;"
    )
    report = PascalScanner().scan(code)
    assert report.breakdown[0].rationale == "Function fact with 1 recursive calls, n/1 reduction"
    assert report.space_complexity.upper_bound == "O(log_1 n)"


def test_linear_extra_work_is_not_inferred():
    """The "+ n" term does not change the solved exponent."""
    code = (
        "function f(n: integer): integer;\n"
        "begin\n"
        "  f := f(n div 2) + f(n div 2) + n;\n"
        "end;"
    )
    params = infer_recurrence(code, "f")
    assert params.branching_factor == 2
    assert params.extra_work is ExtraWork.CONSTANT
    assert PascalScanner().scan(code).breakdown[0].result.upper_bound == "O(n^1.0000)"
