"""Main CLI entry point for the CiviCRM provider."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from civicrm_provider.client.api_client import APIError, CiviCRMClient
from civicrm_provider.core import (
    ProviderConfig,
    ConfigError,
    InputError,
    ResourceError,
    ResourceNotRegisteredError,
    get_resource,
    get_data_source,
    list_resources,
    list_data_sources,
    save_provider_config,
    load_provider_config,
    save_state,
    load_state,
    delete_state,
)
from civicrm_provider.core.schema import (
    AttrKind,
    describe_schema,
    model_from_state,
    model_to_state,
    plan_model,
    schema_of,
)
from civicrm_provider.provider import (
    URL_ENV,
    configure_provider,
    new_data_source,
    new_resource,
)

logger = logging.getLogger(__name__)

CLI_ERRORS = (
    ConfigError,
    InputError,
    ResourceError,
    ResourceNotRegisteredError,
    APIError,
)

_TRUE_VALUES = ("1", "true", "yes", "on")


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def fail(message: str):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def print_json(data: Any):
    print(json.dumps(data, indent=2, sort_keys=True))


def build_client(args) -> CiviCRMClient:
    """
    Build an API client from the global options.

    The url comes from --url, then CIVICRM_URL, then the saved provider
    configuration. The API key comes from --api-key or CIVICRM_API_KEY.
    """
    url = args.url
    insecure = True if args.insecure else None

    if not url and not os.environ.get(URL_ENV):
        try:
            saved = load_provider_config()
        except ConfigError:
            saved = {}
        url = saved.get("url")
        if insecure is None and saved.get("insecure"):
            insecure = True

    return configure_provider(url=url, api_key=args.api_key, insecure=insecure)


def load_config_file(path: str) -> dict[str, Any]:
    """
    Load a declared configuration from a JSON file.

    Raises:
        InputError: If the file is missing or is not a JSON object
    """
    config_file = Path(path)
    if not config_file.exists():
        raise InputError(f"Configuration file not found: {config_file}")

    try:
        with open(config_file) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON in {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise InputError(f"Configuration in {config_file} must be a JSON object")
    return data


def parse_filters(model_cls, pairs: list[str]) -> dict[str, Any]:
    """Parse ``key=value`` filter arguments using the model's attribute types."""
    schema = schema_of(model_cls)
    filters = {}

    for pair in pairs:
        if "=" not in pair:
            raise InputError(f"Invalid filter '{pair}'. Use key=value.")
        key, value = pair.split("=", 1)
        key = key.strip()
        value = value.strip()

        attr = schema.get(key)
        if attr is None:
            raise InputError(f"Unknown filter '{key}'")

        if attr.kind == AttrKind.INT64:
            try:
                filters[key] = int(value)
            except ValueError as e:
                raise InputError(f"Filter '{key}' must be an integer") from e
        elif attr.kind == AttrKind.BOOL:
            filters[key] = value.lower() in _TRUE_VALUES
        else:
            filters[key] = value

    return filters


def render_state(adapter_cls, model) -> dict[str, Any]:
    """State document for display, with sensitive values masked."""
    state = model_to_state(model)
    for name, attr in adapter_cls.schema().items():
        if attr.sensitive and state.get(name) is not None:
            state[name] = "(sensitive)"
    return state


def load_prior(adapter_cls, record_id: int):
    """Load the saved state of a resource, or a bare model with only the id."""
    try:
        state = load_state(adapter_cls.type_name, record_id)
    except ConfigError:
        logger.debug(f"No saved state for {adapter_cls.type_name} {record_id}")
        return adapter_cls.model_cls(id=record_id)
    return model_from_state(adapter_cls.model_cls, state)


def persist(adapter_cls, model):
    path = save_state(adapter_cls.type_name, model.id, model_to_state(model))
    logger.debug(f"State saved to {path}")
    print_json(render_state(adapter_cls, model))


def cmd_configure(args):
    """Handle the configure command."""
    try:
        if not args.url:
            fail("--url is required for configure")

        config = ProviderConfig(url=args.url, api_key="", insecure=args.insecure)
        path = save_provider_config(config)
        print(f"Provider configuration saved to: {path}")
    except CLI_ERRORS as e:
        fail(str(e))


def cmd_resources(args):
    """Handle the resources command."""
    print("Resources:")
    for type_name in list_resources():
        print(f"  {type_name}")
    print()
    print("Data sources:")
    for type_name in list_data_sources():
        print(f"  {type_name}")


def cmd_schema(args):
    """Handle the schema command."""
    try:
        if args.data_source:
            model_cls = get_data_source(args.type).model_cls
        else:
            model_cls = get_resource(args.type).model_cls
        print_json(describe_schema(model_cls))
    except CLI_ERRORS as e:
        fail(str(e))


def cmd_create(args):
    """Handle the create command."""
    try:
        adapter_cls = get_resource(args.type)
        config = load_config_file(args.config)
        planned = plan_model(adapter_cls.model_cls, config)

        with build_client(args) as client:
            created = new_resource(args.type, client).create(planned)

        persist(adapter_cls, created)
    except CLI_ERRORS as e:
        fail(str(e))


def cmd_read(args):
    """Handle the read command."""
    try:
        adapter_cls = get_resource(args.type)
        prior = load_prior(adapter_cls, args.id)

        with build_client(args) as client:
            current = new_resource(args.type, client).read(prior)

        persist(adapter_cls, current)
    except CLI_ERRORS as e:
        fail(str(e))


def cmd_update(args):
    """Handle the update command."""
    try:
        adapter_cls = get_resource(args.type)
        config = load_config_file(args.config)
        prior = load_prior(adapter_cls, args.id)
        planned = plan_model(adapter_cls.model_cls, config, prior)

        with build_client(args) as client:
            updated = new_resource(args.type, client).update(planned, prior)

        persist(adapter_cls, updated)
    except CLI_ERRORS as e:
        fail(str(e))


def cmd_delete(args):
    """Handle the delete command."""
    try:
        adapter_cls = get_resource(args.type)
        prior = load_prior(adapter_cls, args.id)

        with build_client(args) as client:
            new_resource(args.type, client).delete(prior)

        delete_state(args.type, args.id)
        print(f"Deleted {args.type} {args.id}")
    except CLI_ERRORS as e:
        fail(str(e))


def cmd_import(args):
    """Handle the import command."""
    try:
        adapter_cls = get_resource(args.type)

        with build_client(args) as client:
            adapter = new_resource(args.type, client)
            imported = adapter.read(adapter.import_state(args.id))

        persist(adapter_cls, imported)
    except CLI_ERRORS as e:
        fail(str(e))


def cmd_lookup(args):
    """Handle the lookup command."""
    try:
        source_cls = get_data_source(args.type)
        filters = parse_filters(source_cls.model_cls, args.filter or [])

        with build_client(args) as client:
            found = new_data_source(args.type, client).read(filters)

        print_json(model_to_state(found))
    except CLI_ERRORS as e:
        fail(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="civicrm-provider",
        description="Manage CiviCRM access control through the APIv4",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--url", help=f"CiviCRM base URL (or set {URL_ENV})")
    parser.add_argument("--api-key", help="CiviCRM API key (or set CIVICRM_API_KEY)")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS certificate verification (development only)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    configure_parser = subparsers.add_parser("configure", help="Save the provider url and TLS setting")
    configure_parser.set_defaults(func=cmd_configure)

    resources_parser = subparsers.add_parser("resources", help="List resource and data source types")
    resources_parser.set_defaults(func=cmd_resources)

    schema_parser = subparsers.add_parser("schema", help="Show the attributes of a type")
    schema_parser.add_argument("--type", required=True, help="Type name (e.g., 'civicrm_group')")
    schema_parser.add_argument("--data-source", action="store_true", help="Describe the data source")
    schema_parser.set_defaults(func=cmd_schema)

    create_parser = subparsers.add_parser("create", help="Create a resource")
    create_parser.add_argument("--type", required=True, help="Resource type (e.g., 'civicrm_group')")
    create_parser.add_argument("--config", required=True, help="JSON file with the declared attributes")
    create_parser.set_defaults(func=cmd_create)

    read_parser = subparsers.add_parser("read", help="Refresh a resource from CiviCRM")
    read_parser.add_argument("--type", required=True, help="Resource type")
    read_parser.add_argument("--id", required=True, type=int, help="Resource ID")
    read_parser.set_defaults(func=cmd_read)

    update_parser = subparsers.add_parser("update", help="Update a resource")
    update_parser.add_argument("--type", required=True, help="Resource type")
    update_parser.add_argument("--id", required=True, type=int, help="Resource ID")
    update_parser.add_argument("--config", required=True, help="JSON file with the declared attributes")
    update_parser.set_defaults(func=cmd_update)

    delete_parser = subparsers.add_parser("delete", help="Delete a resource")
    delete_parser.add_argument("--type", required=True, help="Resource type")
    delete_parser.add_argument("--id", required=True, type=int, help="Resource ID")
    delete_parser.set_defaults(func=cmd_delete)

    import_parser = subparsers.add_parser("import", help="Import an existing record by ID")
    import_parser.add_argument("--type", required=True, help="Resource type")
    import_parser.add_argument("--id", required=True, help="ID of the existing record")
    import_parser.set_defaults(func=cmd_import)

    lookup_parser = subparsers.add_parser("lookup", help="Look up an existing record")
    lookup_parser.add_argument("--type", required=True, help="Data source type")
    lookup_parser.add_argument(
        "--filter",
        action="append",
        metavar="KEY=VALUE",
        help="Filter attribute (repeatable)",
    )
    lookup_parser.set_defaults(func=cmd_lookup)

    return parser


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
