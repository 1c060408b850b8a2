# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""echoverify CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..client import EchoClient
from ..config import EchoSettings, load_echo_settings
from ..errors import CheckError, EchoTransportError
from ..log import setup_logging
from ..models import ForwardEchoRequest, ParsedResponses

EXIT_OK = 0
EXIT_CHECK_FAILED = 1
EXIT_TRANSPORT_FAILED = 2
CLI_BODY_TRUNCATION_CHARS = 4096


def _header(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key.strip(), val.strip()


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Forward echo probes through an echo instance and verify the replies")
    parser.add_argument("address", help="Echo instance to forward from (host:port or URL)")
    parser.add_argument("url", help="Destination the echo instance should probe")
    parser.add_argument("--count", type=_positive_int, default=1, help="Number of probes to send")
    parser.add_argument("--qps", type=_non_negative_int, default=0, help="Probe rate limit on the forwarding instance (0 = unthrottled)")
    parser.add_argument(
        "--header",
        action="append",
        type=_header,
        default=[],
        metavar="KEY=VALUE",
        help="Header attached to every probe (repeatable)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Deadline for the forward call in seconds")
    parser.add_argument("--expect-ok", action="store_true", help="Require StatusCode=200 on every response")
    parser.add_argument("--expect-host", default=None, help="Require this Host on every response")
    parser.add_argument("--expect-port", type=int, default=None, help="Require this ServicePort on every response")
    parser.add_argument("--expect-version", default=None, help="Require this ServiceVersion on every response")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification when talking to the echo instance",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: ECHOVERIFY_LOG_LEVEL or WARNING)")
    return parser


def run_checks(responses: ParsedResponses, args: argparse.Namespace) -> list[CheckError]:
    failures: list[CheckError | None] = []
    if args.expect_ok:
        failures.append(responses.check_ok())
    if args.expect_host is not None:
        failures.append(responses.check_host(args.expect_host))
    if args.expect_port is not None:
        failures.append(responses.check_port(args.expect_port))
    if args.expect_version is not None:
        failures.append(responses.check_version(args.expect_version))
    return [err for err in failures if err is not None]


def _truncate(text: str, max_chars: int = CLI_BODY_TRUNCATION_CHARS) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "...[truncated]"


def _print_json(responses: ParsedResponses, failures: list[CheckError]) -> None:
    payload: dict[str, Any] = responses.to_dict()
    for item in payload["responses"]:
        item["body"] = _truncate(item["body"])
    payload["failures"] = [msg for err in failures for msg in err.errors]
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(responses: ParsedResponses, failures: list[CheckError]) -> None:
    ok = sum(1 for r in responses if r.is_ok())
    print(f"[echoverify] Responses: {len(responses)} ({ok} OK)")
    for i, response in enumerate(responses):
        print(
            f"  [{i}] code={response.code or '-'} host={response.host or '-'} "
            f"hostname={response.hostname or '-'} version={response.version or '-'} port={response.port or '-'}"
        )
    if failures:
        print("Failures:")
        for err in failures:
            for msg in err.errors:
                print(f"- {msg}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: EchoSettings = load_echo_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    try:
        request = ForwardEchoRequest(
            url=args.url,
            count=args.count,
            qps=args.qps,
            headers=dict(args.header) or None,
        )
        client = EchoClient(args.address, settings=settings)
    except ValueError as exc:
        parser.error(str(exc))

    with client:
        try:
            responses = client.forward_echo(request, timeout=args.timeout)
        except EchoTransportError as exc:
            print(f"[echoverify] {exc.reason}: {exc}", file=sys.stderr)
            return EXIT_TRANSPORT_FAILED

    failures = run_checks(responses, args)
    if args.json:
        _print_json(responses, failures)
    else:
        _pretty_print(responses, failures)

    return EXIT_CHECK_FAILED if failures else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
