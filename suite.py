import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'outcomes': []
}


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailed(AssertionError):
    """raised by assert_that so a failed check can be told apart from a crash."""


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CheckFailed(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "") -> BaseException:
    """call func and require it to raise error_type; returns the raised error."""
    try:
        func()
    except error_type as e:
        return e
    raise CheckFailed(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """executes all registered cases, prints a report, returns True when all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    outcomes = []
    for case in _registry['cases']:
        error = None
        try:
            case['func']()
        except CheckFailed as e:
            error = f"check failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        outcomes.append({'passed': error is None, 'description': case['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {case['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    _registry['outcomes'] = outcomes
    _print_summary(start_time)

    # clear cases so several modules can run one after another in a single process
    _registry['cases'] = []
    return all(o['passed'] for o in outcomes)


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    outcomes = _registry['outcomes']

    total = len(outcomes)
    passed_count = sum(1 for o in outcomes if o['passed'])
    failed_count = total - passed_count
    color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{color}ran {total} tests in {duration:.2f}ms: "
          f"{passed_count} passed, {failed_count} failed{_c.reset}\n")
