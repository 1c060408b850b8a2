# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Ordered batch of parsed echo responses and the checks run against it.

Position ``i`` in a batch is the ``i``-th probe of the forward request. Checks
are plain callables over ``(index, response)`` returning a failure message (or
an exception) and None when the record passes. Every record is checked; all
failures are reported together as one ``CheckError``. An empty batch fails
every check.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, NoReturn, overload

from ..errors import CheckError
from .response import CODE_OK, ParsedResponse

NO_RESPONSES = "no responses received"

CheckResult = str | Exception | None
Check = Callable[[int, ParsedResponse], CheckResult]
FailFn = Callable[[str], NoReturn]


def _text(value: str | None) -> str:
    return "" if value is None else value


def _mismatch(index: int, field: str, expected: str, actual: str | None) -> str:
    return f"response[{index}] {field}: expected {expected}, received {_text(actual)}"


def _fail(err: CheckError, fail: FailFn | None) -> None:
    if fail is None:
        import pytest

        pytest.fail(str(err), pytrace=False)
    fail(str(err))


class ParsedResponses(Sequence[ParsedResponse]):
    """Immutable, index-significant collection of ParsedResponse records."""

    __slots__ = ("_responses",)

    def __init__(self, responses: Iterable[ParsedResponse] = ()):
        self._responses: tuple[ParsedResponse, ...] = tuple(responses)

    @overload
    def __getitem__(self, index: int) -> ParsedResponse: ...

    @overload
    def __getitem__(self, index: slice) -> ParsedResponses: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ParsedResponses(self._responses[index])
        return self._responses[index]

    def __len__(self) -> int:
        return len(self._responses)

    def __iter__(self) -> Iterator[ParsedResponse]:
        return iter(self._responses)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParsedResponses):
            return self._responses == other._responses
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._responses)

    def __repr__(self) -> str:
        return f"ParsedResponses({list(self._responses)!r})"

    def check(self, check: Check) -> CheckError | None:
        """Run ``check`` over every response and collect all failures."""
        if not self._responses:
            return CheckError([NO_RESPONSES])

        errors: list[str] = []
        for i, response in enumerate(self._responses):
            result = check(i, response)
            if result is not None:
                errors.append(str(result))
        if errors:
            return CheckError(errors)
        return None

    def check_or_fail(self, check: Check, *, fail: FailFn | None = None) -> None:
        """Like ``check``, but aborts the current test on failure."""
        err = self.check(check)
        if err is not None:
            _fail(err, fail)

    def check_ok(self) -> CheckError | None:
        def _check(i: int, response: ParsedResponse) -> CheckResult:
            if not response.is_ok():
                return _mismatch(i, "StatusCode", CODE_OK, response.code)
            return None

        return self.check(_check)

    def check_ok_or_fail(self, *, fail: FailFn | None = None) -> None:
        err = self.check_ok()
        if err is not None:
            _fail(err, fail)

    def check_host(self, expected: str) -> CheckError | None:
        def _check(i: int, response: ParsedResponse) -> CheckResult:
            if response.host != expected:
                return _mismatch(i, "Host", expected, response.host)
            return None

        return self.check(_check)

    def check_host_or_fail(self, expected: str, *, fail: FailFn | None = None) -> None:
        err = self.check_host(expected)
        if err is not None:
            _fail(err, fail)

    def check_port(self, expected: int) -> CheckError | None:
        """Compare each reported port with ``expected`` as text."""
        expected_text = str(expected)

        def _check(i: int, response: ParsedResponse) -> CheckResult:
            if response.port != expected_text:
                return _mismatch(i, "Port", expected_text, response.port)
            return None

        return self.check(_check)

    def check_port_or_fail(self, expected: int, *, fail: FailFn | None = None) -> None:
        err = self.check_port(expected)
        if err is not None:
            _fail(err, fail)

    def check_version(self, expected: str) -> CheckError | None:
        def _check(i: int, response: ParsedResponse) -> CheckResult:
            if response.version != expected:
                return _mismatch(i, "Version", expected, response.version)
            return None

        return self.check(_check)

    def check_version_or_fail(self, expected: str, *, fail: FailFn | None = None) -> None:
        err = self.check_version(expected)
        if err is not None:
            _fail(err, fail)

    def count(self, text: str) -> int:  # type: ignore[override]
        """
        Count occurrences of ``text`` within the bodies of all responses.

        Replaces ``Sequence.count``: the argument is a substring searched in
        each body, not a record to compare against the elements.
        """
        return sum(response.count(text) for response in self._responses)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": len(self._responses),
            "responses": [response.to_dict() for response in self._responses],
        }


__all__ = ["Check", "NO_RESPONSES", "ParsedResponses"]
