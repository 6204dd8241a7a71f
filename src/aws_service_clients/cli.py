"""Command line interface for the service clients."""
import argparse
import json
import logging
import sys
from typing import List, Optional

from .aws_client_factory import available_services, create_client
from .config import ClientConfiguration
from .config_validator import validate_config
from .error_handler import AWSClientError, handle_error
from .logging_config import setup_logging
from .services import load_client_class


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aws-service-clients", description="Signed AWS service clients")
    parser.add_argument('--log-level', default=None, help='Log level (DEBUG, INFO, WARNING, ERROR)')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('services', help='List available services')

    operations_parser = subparsers.add_parser('operations', help='List the operations of a service')
    operations_parser.add_argument('service', help='Service id or signing name')

    call_parser = subparsers.add_parser('call', help='Call an operation and print the result as JSON')
    call_parser.add_argument('service', help='Service id or signing name')
    call_parser.add_argument('operation', help='Operation name (GetCase or get_case)')
    call_parser.add_argument('--params', default='{}', help='Request members as a JSON object')
    call_parser.add_argument('--region', help='AWS region')
    call_parser.add_argument('--endpoint-url', help='Override the service endpoint')
    call_parser.add_argument('--config', help='JSON client configuration file')

    validate_parser = subparsers.add_parser('validate-config', help='Validate a JSON client configuration file')
    validate_parser.add_argument('path', help='Configuration file path')

    return parser


def _list_operations(service: str) -> int:
    client_class = load_client_class(service)
    for operation in client_class.model.operations:
        print(f"{operation.name:<48} {operation.http_method:<6} {operation.path}")
    return 0


def _call(args) -> int:
    try:
        params = json.loads(args.params)
    except json.JSONDecodeError as e:
        print(f"❌ --params is not valid JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(params, dict):
        print("❌ --params must be a JSON object", file=sys.stderr)
        return 2

    if args.config:
        config = ClientConfiguration.from_file(args.config)
        client = create_client(args.service, config=config)
    else:
        overrides = {"endpoint_override": args.endpoint_url} if args.endpoint_url else {}
        client = create_client(args.service, region=args.region, **overrides)

    with client:
        outcome = client.execute(args.operation, **params)

    if outcome.is_success:
        result = outcome.result
        if result.body is not None:
            sys.stdout.buffer.write(result.body)
        else:
            print(json.dumps(result.to_dict(), indent=2, default=str))
        return 0

    error = outcome.error
    print(json.dumps({
        "error": error.error_type.name,
        "exception": error.exception_name,
        "message": error.message,
        "retryable": error.retryable,
        "responseCode": error.response_code,
        "requestId": error.request_id,
    }, indent=2), file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(log_level=args.log_level or 'WARNING', enable_structlog=False, stream=sys.stderr)

    try:
        if args.command == 'services':
            for name in available_services():
                print(name)
            return 0
        elif args.command == 'operations':
            return _list_operations(args.service)
        elif args.command == 'call':
            return _call(args)
        elif args.command == 'validate-config':
            is_valid, summary = validate_config(args.path)
            print(summary)
            return 0 if is_valid else 1
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\n❌ Operation cancelled by user", file=sys.stderr)
        return 1
    except (KeyError, AWSClientError) as e:
        client_error = handle_error(e, {"command": args.command}, log_level=logging.DEBUG)
        print(f"❌ Error: {client_error.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
