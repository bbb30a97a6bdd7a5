"""Command-line interface for cms-flag-preview."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from cms_flag_preview.clients import DEFAULT_BASE_URL, ClientError, ContentstackClient
from cms_flag_preview.lookup import ContentTypeResolver
from cms_flag_preview.preview import ContentPreviewService, error_status, handle_flag_preview
from schemas.content_reference import ContentReference
from schemas.credentials import ContentstackCredentials

DEFAULT_TIMEOUT = 10.0


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _client_config(args: argparse.Namespace) -> dict:
    return {
        "api_key": args.api_key,
        "delivery_token": args.delivery_token,
        "base_url": args.base_url,
        "timeout": args.timeout,
    }


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


def preview(args: argparse.Namespace) -> int:
    """Execute the preview command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        reference = ContentReference(
            cms_type="contentstack",
            entry_id=args.entry_id,
            environment=args.environment,
            content_type=args.content_type,
            preview=args.preview,
        )
    except PydanticValidationError as e:
        logger.error(f"Invalid content reference: {e}")
        return 1

    try:
        with ContentstackClient(_client_config(args)) as client:
            service = ContentPreviewService(client)
            record = service.preview(
                reference,
                discovery_environment=args.credentials_environment or args.environment,
            )

        _print_json({"preview": record.to_response()})
        return 0

    except ClientError as e:
        status, label = error_status(e)
        logger.error(f"Failed to build preview: {e.message}")
        _print_json({"error": label, "kind": e.kind, "detail": e.message, "status": status})
        return 1


def handle(args: argparse.Namespace) -> int:
    """Execute the handle command.

    Runs the flag preview request handler on a JSON request body file.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if the handler answered 200, non-zero otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    request_path = args.request.resolve()
    if not request_path.exists():
        logger.error(f"Request file not found: {request_path}")
        return 1

    try:
        body = json.loads(request_path.read_text())
    except json.JSONDecodeError as e:
        logger.error(f"Request file is not valid JSON: {e}")
        return 1

    defaults = None
    if args.api_key or args.delivery_token or args.credentials_environment:
        defaults = ContentstackCredentials(
            api_key=args.api_key or "",
            delivery_token=args.delivery_token or "",
            environment=args.credentials_environment or "",
        )

    status, response = handle_flag_preview(
        body,
        default_credentials=defaults,
        client_config={"base_url": args.base_url, "timeout": args.timeout},
    )

    _print_json({"status": status, "body": response})
    return 0 if status == 200 else 1


def discover(args: argparse.Namespace) -> int:
    """Execute the discover command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every entry was located, non-zero otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        with ContentstackClient(_client_config(args)) as client:
            resolver = ContentTypeResolver(client)

            if args.metadata:
                results = {}
                for entry_id in args.entry_ids:
                    content_type, metadata = resolver.resolve_with_metadata(
                        entry_id, args.environment
                    )
                    results[entry_id] = {
                        "contentType": content_type,
                        "metadata": metadata.model_dump(exclude_none=True) if metadata else None,
                    }
            else:
                results = resolver.resolve_many(args.entry_ids, args.environment)

    except ClientError as e:
        logger.error(f"Discovery failed: {e.message}")
        return 1

    _print_json(results)

    missing = [
        entry_id
        for entry_id, result in results.items()
        if result is None or (isinstance(result, dict) and result["contentType"] is None)
    ]
    for entry_id in missing:
        logger.warning(f"  {entry_id}: not found")

    return 1 if missing else 0


def _add_connection_arguments(parser: argparse.ArgumentParser, required: bool = True) -> None:
    parser.add_argument(
        "--api-key",
        type=str,
        required=required,
        help="Contentstack stack API key",
    )
    parser.add_argument(
        "--delivery-token",
        type=str,
        required=required,
        help="Contentstack delivery token",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=DEFAULT_BASE_URL,
        help=f"Delivery API base URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="cms-flag-preview",
        description="Preview Contentstack content referenced by feature flag variations",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    preview_parser = subparsers.add_parser(
        "preview",
        help="Fetch an entry or asset and print its preview record",
        description="Resolve a content reference against the Contentstack Delivery API and print the normalized preview record.",
    )
    preview_parser.add_argument(
        "--entry-id",
        type=str,
        required=True,
        help="Entry or asset uid",
    )
    preview_parser.add_argument(
        "--environment",
        type=str,
        required=True,
        help="Publishing environment to read from",
    )
    preview_parser.add_argument(
        "--content-type",
        type=str,
        default=None,
        help='Content type uid, or "asset" (default: discover it)',
    )
    preview_parser.add_argument(
        "--preview",
        action="store_true",
        help="Request preview content for entries",
    )
    preview_parser.add_argument(
        "--credentials-environment",
        type=str,
        default=None,
        help="Environment used for content type discovery (default: --environment)",
    )
    _add_connection_arguments(preview_parser)
    preview_parser.set_defaults(func=preview)

    handle_parser = subparsers.add_parser(
        "handle",
        help="Run the flag preview request handler on a JSON request body",
        description="Answer a flag management preview request read from a JSON file and print the status and response body.",
    )
    handle_parser.add_argument(
        "--request",
        type=Path,
        required=True,
        help="Path to the JSON request body",
    )
    handle_parser.add_argument(
        "--credentials-environment",
        type=str,
        default=None,
        help="Environment for the default credentials",
    )
    _add_connection_arguments(handle_parser, required=False)
    handle_parser.set_defaults(func=handle)

    discover_parser = subparsers.add_parser(
        "discover",
        help="Find the content type of one or more entries",
        description="List the content types of an environment and probe each for the given entry uids.",
    )
    discover_parser.add_argument(
        "entry_ids",
        nargs="+",
        help="Entry uids to locate",
    )
    discover_parser.add_argument(
        "--environment",
        type=str,
        required=True,
        help="Publishing environment to search",
    )
    discover_parser.add_argument(
        "--metadata",
        action="store_true",
        help="Also fetch metadata for each discovered content type",
    )
    _add_connection_arguments(discover_parser)
    discover_parser.set_defaults(func=discover)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
