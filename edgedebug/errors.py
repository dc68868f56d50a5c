from __future__ import annotations

from pydantic import ValidationError

EXIT_DECODE = 1
EXIT_USAGE = 2
EXIT_STORE = 3


class EdgeDebugError(Exception):
    exit_code = 1


class UsageError(EdgeDebugError):
    """Bad arguments or options, raised before the store is touched."""

    exit_code = EXIT_USAGE


class StoreError(EdgeDebugError):
    """The backing store cannot be opened or queried."""

    exit_code = EXIT_STORE


class DecodeError(EdgeDebugError):
    """A record payload does not have the shape a render path reads."""

    exit_code = EXIT_DECODE

    def __init__(self, key: str, problems: tuple[str, ...]) -> None:
        self.key = key
        self.problems = problems
        details = "; ".join(problems) if problems else "unknown decode failure"
        super().__init__(f"cannot decode record {key!r}: {details}")


def validation_problems(exc: ValidationError) -> tuple[str, ...]:
    """Flatten a pydantic error into `dotted.path: message` strings."""
    problems: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return tuple(problems)
