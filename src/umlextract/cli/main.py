# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the umlextract command-line interface."""

import argparse
import sys
from pathlib import Path

from umlextract.config import CONFIG_FILE_NAME, LOG_LEVELS, ConfigError, ExtractorConfig, load_config
from umlextract.extraction.artifact import serialize, write_artifact
from umlextract.extraction.errors import ExtractionFailed
from umlextract.extraction.parser import PARSERS, extract
from umlextract.log import setup_logging
from umlextract.registry import (
    DatabaseTypes,
    RegistryError,
    builtin_database_types,
    get_database_types,
    load_database_types,
)
from umlextract.xmi.reader import XmiReadError, read_xmi

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the umlextract CLI."""
    parser = argparse.ArgumentParser(
        prog="umlextract",
        description="umlextract: UML model extraction for code generation",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # extract subcommand
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract a UML model into a JSON artifact",
        description="Read an XMI export, extract its model, and write it as JSON.",
    )
    extract_parser.add_argument("file", help="XMI file to extract")
    extract_parser.add_argument(
        "-o",
        "--output",
        help="File to write the artifact to (default: standard output)",
    )
    extract_parser.add_argument(
        "--editor",
        default="modelio",
        choices=sorted(PARSERS),
        help="Modelling tool that produced the export (default: modelio)",
    )
    _add_registry_arguments(extract_parser)
    extract_parser.add_argument(
        "--config",
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    extract_parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Logging verbosity (default: WARNING)",
    )

    # types subcommand
    types_parser = subparsers.add_parser(
        "types",
        help="List the types and validations of a registry",
        description="Print every type supported by a registry with its validations.",
    )
    _add_registry_arguments(types_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_registry_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--database-type",
        help=f"Built-in type registry ({', '.join(builtin_database_types())}; default: sql)",
    )
    parser.add_argument(
        "--type-registry",
        help="Custom type registry YAML file (overrides --database-type)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "extract":
        return _cmd_extract(args)
    if args.command == "types":
        return _cmd_types(args)
    return 0


def _load_config(args: argparse.Namespace) -> ExtractorConfig:
    """Load the configuration file, if any, and apply command-line overrides."""
    config_arg = getattr(args, "config", None)
    if config_arg:
        config = load_config(Path(config_arg))
    elif Path(CONFIG_FILE_NAME).exists():
        config = load_config(Path(CONFIG_FILE_NAME))
    else:
        config = ExtractorConfig()

    if args.database_type:
        config.database_type = args.database_type
        config.type_registry = None
    if args.type_registry:
        config.type_registry = Path(args.type_registry)
    if getattr(args, "log_level", None):
        config.log_level = args.log_level
    return config


def _resolve_registry(config: ExtractorConfig) -> DatabaseTypes:
    if config.type_registry is not None:
        return load_database_types(config.type_registry)
    return get_database_types(config.database_type)


def _cmd_extract(args: argparse.Namespace) -> int:
    """Handle the extract subcommand."""
    source = Path(args.file)
    if not source.exists():
        print(f"Error: file '{source}' does not exist.", file=sys.stderr)
        return 1

    try:
        config = _load_config(args)
        setup_logging(config.log_level)
        registry = _resolve_registry(config)
        document = read_xmi(source)
        model = extract(document, registry, editor=args.editor)
    except (ConfigError, RegistryError, XmiReadError, ExtractionFailed) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        output = Path(args.output)
        try:
            write_artifact(model, output)
        except OSError as exc:
            print(f"Error: cannot write artifact '{output}': {exc}", file=sys.stderr)
            return 1
        print(
            f"Extracted {len(model.classes)} class(es), {len(model.enums)} enum(s) "
            f"and {len(model.fields)} field(s) to '{output}'."
        )
    else:
        print(serialize(model, indent=2))
    return 0


def _cmd_types(args: argparse.Namespace) -> int:
    """Handle the types subcommand."""
    try:
        registry = _resolve_registry(_load_config(args))
    except (ConfigError, RegistryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Registry '{registry.name}':")
    for type_name in sorted(registry.types):
        validations = ", ".join(registry.types[type_name]) or "-"
        print(f"  {type_name}: {validations}")
    return 0
