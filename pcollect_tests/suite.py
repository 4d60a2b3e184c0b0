import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailed(AssertionError):
    """an assert_that failure, reported apart from unexpected exceptions."""


def test(description: str) -> Callable:
    """decorator registering a function as a described test case.
    the function keeps its name, so pytest collects it as well."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CheckFailed(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "expected an exception") -> BaseException:
    """calls func and returns the raised error, failing if it is not error_type."""
    try:
        func()
    except error_type as e:
        return e
    raise CheckFailed(f"{message} ({error_type.__name__} not raised)")


def run(title: str = "test run") -> bool:
    """runs every registered test, prints a report and returns whether all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    started = time.perf_counter()
    results = []

    for case in _registry['tests']:
        error = None
        try:
            case['func']()
        except CheckFailed as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        results.append({'passed': error is None, 'description': case['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {case['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    _registry['results'] = results
    # clear so several suites can run from one script
    _registry['tests'] = []

    elapsed = (time.perf_counter() - started) * 1000
    failed = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed == 0 else _c.fail
    print(f"\n{colour}ran {len(results)} tests in {elapsed:.2f}ms: "
          f"{len(results) - failed} passed, {failed} failed{_c.reset}\n")
    return failed == 0
