# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from turbot_provider.app import configure_provider, list_resource_akas, read_effective_policy_value
from turbot_provider.common import configure_logging
from turbot_provider.config import ProviderConfig

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from turbot_provider.adapters.turbot import ClientFactory

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect a Turbot workspace")
    parser.add_argument(
        "--profile",
        type=str,
        default="",
        help="Profile in the shared credentials file (defaults to TURBOT_PROFILE or 'default')",
    )
    parser.add_argument(
        "--credentials-file",
        type=str,
        default="",
        help="Path of the shared credentials file",
    )
    parser.add_argument(
        "--workspace",
        type=str,
        default="",
        help="Workspace URL or host, overriding the environment and profile",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every GraphQL operation",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("validate", help="Check that the credentials are accepted")

    akas = subparsers.add_parser("resource-akas", help="Print every aka of a resource")
    akas.add_argument("aka", type=str, help="Id or aka of the resource")

    policy_value = subparsers.add_parser(
        "policy-value",
        help="Print the effective value of a policy on a resource",
    )
    policy_value.add_argument(
        "--policy-type",
        type=str,
        required=True,
        help="URI of the policy type",
    )
    policy_value.add_argument(
        "--resource",
        type=str,
        required=True,
        help="Id or aka of the resource",
    )

    return parser.parse_args(list(argv))


def _provider_config(args: argparse.Namespace) -> ProviderConfig:
    return ProviderConfig(
        workspace=args.workspace,
        profile=args.profile,
        credentials_file=args.credentials_file,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    client_factory: ClientFactory | None = None,
) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    # argparse exits with status 2 on invalid arguments
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        client = configure_provider(_provider_config(parsed_args), client_factory=client_factory)
        if parsed_args.command == "validate":
            print(f"Credentials accepted by {client.url}")
        elif parsed_args.command == "resource-akas":
            for aka in list_resource_akas(client, parsed_args.aka):
                print(aka)
        elif parsed_args.command == "policy-value":
            value = read_effective_policy_value(
                client,
                policy_type=parsed_args.policy_type,
                resource_aka=parsed_args.resource,
            )
            print(value.value.to_text())
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error talking to Turbot")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
