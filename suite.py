import math
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
NOTE_FACE = '(・_・;)'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """assertion failure raised by assert_that and assert_close."""
    __test__ = False

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        entry = {'func': func, 'description': description, 'note': None}
        _suite_state['tests'].append(entry)

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        wrapper._suite_entry = entry
        return wrapper

    return decorator


def known_ambiguity(note: str) -> Callable:
    """
    tags a registered test as pinning down behavior that is ambiguous on purpose.
    apply it above @test; the note is printed next to the result.
    """

    def decorator(func: Callable) -> Callable:
        entry = getattr(func, '_suite_entry', None)
        if entry is not None:
            entry['note'] = note
        return func

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_close(actual: float, expected: float, message: str = "values differ", tol: float = 1e-9) -> None:
    """float comparison with an absolute tolerance."""
    if not math.isclose(actual, expected, rel_tol=0.0, abs_tol=tol):
        raise TestAssertionError(f"{message} (expected {expected!r}, got {actual!r})")


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report and returns True if all passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error: Optional[str] = None

        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        passed = error is None
        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")
        if test_item['note']:
            print(f"    {_c.warn}{NOTE_FACE} known ambiguity: {test_item['note']}{_c.reset}")

    all_passed = _print_summary(start_time)

    # clear tests after run so several suites can run in one process
    _suite_state['tests'] = []
    return all_passed


def _print_summary(start_time: float) -> bool:
    """prints the final summary of the test run."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
