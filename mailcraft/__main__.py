"""CLI entry point for mailcraft.

This module acts as the central entry point for the project's CLI tools.
Each command parses its own arguments and returns a process exit code.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from mailcraft.config import EnvVar, get_environment, get_environment_info, list_environment_variables
from mailcraft.core.log import get_logger, setup_logging
from mailcraft.document import (
    DEFAULT_TITLE,
    StarterMode,
    TemplateParseError,
    parse_template,
    serialize_template,
    starter_template,
)
from mailcraft.schema import get_component_schema, list_component_schemas, unknown_prop_keys

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _read_template(path: Path):
    """Read and parse a template file, logging failures.

    Returns:
        The parsed document, or None when it cannot be read or parsed.
    """
    try:
        return parse_template(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
    except TemplateParseError as e:
        logger.error(f"{path}: {e}")
    return None


# =============================================================================
# Format Command
# =============================================================================


def cmd_format(args: argparse.Namespace) -> int:
    """Handle the format command."""
    original = args.file.read_text(encoding="utf-8") if args.file.exists() else None
    doc = _read_template(args.file)
    if doc is None:
        return 1

    formatted = serialize_template(doc)
    if args.check:
        if formatted != original:
            logger.warning(f"{args.file} is not formatted")
            return 1
        logger.info(f"{args.file} is formatted")
        return 0

    if args.write:
        if formatted != original:
            args.file.write_text(formatted, encoding="utf-8")
            logger.info(f"Reformatted {args.file}")
        return 0

    sys.stdout.write(formatted)
    return 0


def handle_format_command(argv: list[str]) -> int:
    """Handle format-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m mailcraft format",
        description="Parse a template and write it back in canonical form",
    )
    parser.add_argument("file", type=Path, help="Template source file")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the file is not already formatted",
    )
    mode.add_argument(
        "--write",
        "-w",
        action="store_true",
        help="Rewrite the file in place",
    )
    return cmd_format(parser.parse_args(argv))


# =============================================================================
# Inspect Command
# =============================================================================


def cmd_inspect(args: argparse.Namespace) -> int:
    """Handle the inspect command."""
    doc = _read_template(args.file)
    if doc is None:
        return 1

    for index, component in enumerate(doc.components):
        if get_component_schema(component.type) is None:
            logger.warning(f"Component {index}: unknown type '{component.type}'")
            continue
        unknown = unknown_prop_keys(component.type, component.props)
        if unknown:
            logger.warning(f"Component {index} ({component.type}): unknown props {', '.join(unknown)}")

    print(json.dumps(doc.to_dict(), indent=2))
    return 0


def handle_inspect_command(argv: list[str]) -> int:
    """Handle inspect-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m mailcraft inspect",
        description="Print the parsed document as JSON",
    )
    parser.add_argument("file", type=Path, help="Template source file")
    return cmd_inspect(parser.parse_args(argv))


# =============================================================================
# Schemas Command
# =============================================================================


def cmd_schemas(args: argparse.Namespace) -> int:
    """Handle the schemas command."""
    if args.type:
        schema = get_component_schema(args.type)
        if schema is None:
            logger.error(f"Unknown component type: {args.type}")
            return 1
        print(json.dumps(schema.to_dict(), indent=2))
        return 0

    print("Component Schemas")
    print("=" * 40)
    for schema in list_component_schemas():
        groups = f", {len(schema.repeatable_groups)} groups" if schema.repeatable_groups else ""
        print(f"  {schema.name:<20} {schema.label} ({len(schema.props)} props{groups})")
    return 0


def handle_schemas_command(argv: list[str]) -> int:
    """Handle schemas-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m mailcraft schemas",
        description="List component schemas or dump one as JSON",
    )
    parser.add_argument("type", nargs="?", default=None, help="Component type to dump")
    return cmd_schemas(parser.parse_args(argv))


# =============================================================================
# Preview Command
# =============================================================================


def _parse_variables(pairs: list[str]) -> dict[str, str] | None:
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            logger.error(f"Invalid variable '{pair}', expected KEY=VALUE")
            return None
        variables[key.strip()] = value
    return variables


def cmd_preview(args: argparse.Namespace) -> int:
    """Handle the preview command."""
    from mailcraft.preview import project_for_preview, recover_indices, tagged_indices
    from mailcraft.render import (
        CompileError,
        CompilerClient,
        build_preview_variables,
        find_missing_preview_variables,
    )

    doc = _read_template(args.file)
    if doc is None:
        return 1
    overrides = _parse_variables(args.var)
    if overrides is None:
        return 1

    markup = project_for_preview(doc, set(args.hide))
    variables = build_preview_variables(overrides)
    missing = find_missing_preview_variables(markup, variables)
    if missing:
        logger.warning(f"No preview value for: {', '.join(missing)}")

    client = CompilerClient(base_url=args.url)
    try:
        result = client.compile(markup, variables)
    except CompileError as e:
        logger.error(f"Compile failed: {e}")
        return 1
    finally:
        client.close()

    if result.error is not None:
        logger.error(f"Compiler error: {result.error}")
        return 1

    html = recover_indices(result.html)
    logger.info(f"Traced {len(tagged_indices(html))} of {len(doc.components)} components")
    if args.output:
        args.output.write_text(html, encoding="utf-8")
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(html)
    return 0


def handle_preview_command(argv: list[str]) -> int:
    """Handle preview-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m mailcraft preview",
        description="Compile a template through the compiler service with component tracing",
    )
    parser.add_argument("file", type=Path, help="Template source file")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write HTML here instead of stdout",
    )
    parser.add_argument(
        "--hide",
        type=int,
        nargs="+",
        default=[],
        metavar="N",
        help="Component indices to leave out of the preview",
    )
    parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Preview variable override (repeatable)",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Compiler service URL (default: MAILCRAFT_COMPILER_URL)",
    )
    return cmd_preview(parser.parse_args(argv))


# =============================================================================
# Starter Command
# =============================================================================


def handle_starter_command(argv: list[str]) -> int:
    """Handle the starter command."""
    parser = argparse.ArgumentParser(
        prog="python -m mailcraft starter",
        description="Print a starter template",
    )
    parser.add_argument("--title", "-t", type=str, default=DEFAULT_TITLE, help="Template title")
    parser.add_argument(
        "--mode",
        type=str,
        default=StarterMode.VISUAL.value,
        choices=[m.value for m in StarterMode],
        help="Starter layout (default: visual)",
    )
    args = parser.parse_args(argv)
    sys.stdout.write(starter_template(args.title, StarterMode(args.mode)))
    return 0


# =============================================================================
# Env Command
# =============================================================================


def handle_env_command(argv: list[str]) -> int:
    """Handle the env command."""
    parser = argparse.ArgumentParser(
        prog="python -m mailcraft env",
        description="List configuration variables and their current values",
    )
    parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        choices=["service", "editor", "logging"],
        help="Only show one category",
    )
    args = parser.parse_args(argv)

    for var in list_environment_variables(args.category):
        info = get_environment_info(var)
        value = get_environment(var)
        print(f"{info.name:<34} {value!s:<24} {info.description}")
    return 0


# =============================================================================
# Entry Point
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python -m mailcraft {command} [args]")
    print("\n=== Templates ===")
    print("  format     Re-serialize a template in canonical form")
    print("  inspect    Print the parsed document as JSON")
    print("  starter    Print a starter template")
    print("\n=== Preview ===")
    print("  preview    Compile a template with component tracing")
    print("\n=== Reference ===")
    print("  schemas    List component schemas")
    print("  env        List configuration variables")
    print("\nExamples:")
    print("  python -m mailcraft format email.html --check")
    print("  python -m mailcraft preview email.html -o out.html --hide 2")
    print("  python -m mailcraft schemas hero")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        show_help()
        return 1

    command, rest_args = argv[0], argv[1:]
    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "format": handle_format_command,
        "inspect": handle_inspect_command,
        "schemas": handle_schemas_command,
        "preview": handle_preview_command,
        "starter": handle_starter_command,
        "env": handle_env_command,
    }

    if command in commands:
        setup_logging(get_environment(EnvVar.LOG_LEVEL))
        return commands[command](rest_args)

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
