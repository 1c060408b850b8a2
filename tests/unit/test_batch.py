# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from echoverify.errors import CheckError
from echoverify.models import NO_RESPONSES, ParsedResponses
from echoverify.parsing import parse_responses


class FailCalled(Exception):
    pass


def recording_fail(messages):
    def _fail(message):
        messages.append(message)
        raise FailCalled(message)

    return _fail


def test_empty_batch_fails_every_check():
    empty = ParsedResponses()
    assert len(empty) == 0
    for err in (
        empty.check(lambda i, r: None),
        empty.check_ok(),
        empty.check_host("a.com"),
        empty.check_port(80),
        empty.check_version("v1"),
    ):
        assert isinstance(err, CheckError)
        assert err.errors == [NO_RESPONSES]


def test_check_collects_every_failure():
    responses = parse_responses(["StatusCode=500", "StatusCode=200", "StatusCode=503"])
    seen = []

    def predicate(i, response):
        seen.append(i)
        if not response.is_ok():
            return f"response[{i}] bad"
        return None

    err = responses.check(predicate)
    assert seen == [0, 1, 2]
    assert err is not None
    assert err.errors == ["response[0] bad", "response[2] bad"]
    assert "2 errors occurred" in str(err)
    assert "response[0] bad" in str(err)
    assert "response[2] bad" in str(err)


def test_check_accepts_exception_results():
    responses = parse_responses(["a", "b"])
    err = responses.check(lambda i, r: ValueError(f"idx {i}") if i == 1 else None)
    assert err is not None
    assert err.errors == ["idx 1"]
    assert str(err) == "1 error occurred:\n\t* idx 1"


def test_check_passes_returns_none():
    responses = parse_responses(["x"])
    assert responses.check(lambda i, r: None) is None


def test_check_ok():
    assert parse_responses(["StatusCode=200", "StatusCode=200"]).check_ok() is None

    err = parse_responses(["StatusCode=200", "StatusCode=404", "nothing"]).check_ok()
    assert err is not None
    assert err.errors == [
        "response[1] StatusCode: expected 200, received 404",
        "response[2] StatusCode: expected 200, received ",
    ]


def test_single_record_scenario():
    responses = parse_responses(["StatusCode=200\nHost=a.com\nHostname=pod-1"])
    assert len(responses) == 1
    record = responses[0]
    assert record.code == "200"
    assert record.host == "a.com"
    assert record.hostname == "pod-1"

    assert responses.check_ok() is None
    assert responses.check_host("a.com") is None

    err = responses.check_host("b.com")
    assert err is not None
    assert err.errors == ["response[0] Host: expected b.com, received a.com"]


def test_check_port_compares_text():
    assert parse_responses(["ServicePort=8080"]).check_port(8080) is None

    err = parse_responses(["StatusCode=200"]).check_port(8080)
    assert err is not None
    assert err.errors == ["response[0] Port: expected 8080, received "]

    err = parse_responses(["ServicePort=080"]).check_port(80)
    assert err is not None
    assert err.errors == ["response[0] Port: expected 80, received 080"]


def test_check_version():
    responses = parse_responses(["ServiceVersion=v1", "ServiceVersion=v2"])
    err = responses.check_version("v1")
    assert err is not None
    assert err.errors == ["response[1] Version: expected v1, received v2"]


def test_count_sums_over_bodies():
    assert parse_responses(["xx", "x"]).count("x") == 3
    assert parse_responses(["aaaa"]).count("aa") == 2
    assert ParsedResponses().count("x") == 0


def test_batch_is_a_read_only_sequence():
    responses = parse_responses(["Hostname=a", "Hostname=b", "Hostname=c"])
    assert responses[-1].hostname == "c"
    sliced = responses[1:]
    assert isinstance(sliced, ParsedResponses)
    assert [r.hostname for r in sliced] == ["b", "c"]
    assert responses == parse_responses(["Hostname=a", "Hostname=b", "Hostname=c"])
    with pytest.raises(TypeError):
        responses[0] = responses[1]  # type: ignore[index]


def test_to_dict():
    data = parse_responses(["StatusCode=200"]).to_dict()
    assert data["count"] == 1
    assert data["responses"][0]["code"] == "200"
    assert data["responses"][0]["body"] == "StatusCode=200"


def test_or_fail_variants_use_injected_fail():
    responses = parse_responses(["StatusCode=500\nHost=a.com\nServicePort=1\nServiceVersion=v1"])
    cases = [
        lambda fail: responses.check_ok_or_fail(fail=fail),
        lambda fail: responses.check_host_or_fail("b.com", fail=fail),
        lambda fail: responses.check_port_or_fail(2, fail=fail),
        lambda fail: responses.check_version_or_fail("v2", fail=fail),
        lambda fail: responses.check_or_fail(lambda i, r: "always", fail=fail),
    ]
    for case in cases:
        messages = []
        with pytest.raises(FailCalled):
            case(recording_fail(messages))
        assert len(messages) == 1
        assert messages[0].startswith("1 error occurred:")


def test_or_fail_passes_silently():
    messages = []
    responses = parse_responses(["StatusCode=200\nHost=a.com\nServicePort=80\nServiceVersion=v1"])
    responses.check_ok_or_fail(fail=recording_fail(messages))
    responses.check_host_or_fail("a.com", fail=recording_fail(messages))
    responses.check_port_or_fail(80, fail=recording_fail(messages))
    responses.check_version_or_fail("v1", fail=recording_fail(messages))
    assert messages == []


def test_or_fail_defaults_to_pytest_fail():
    with pytest.raises(pytest.fail.Exception) as excinfo:
        ParsedResponses().check_ok_or_fail()
    assert NO_RESPONSES in str(excinfo.value)


def test_batch_module_does_not_import_pytest_eagerly():
    import echoverify.models.batch as batch_module

    assert "pytest" not in vars(batch_module)


def test_count_documents_that_it_replaces_sequence_count():
    assert "Sequence.count" in ParsedResponses.count.__doc__
    responses = parse_responses(["ab", "ab"])
    assert responses.count("ab") == 2
    assert responses.count("abab") == 0
