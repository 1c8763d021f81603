"""layerforge command-line interface.

Usage::

    layerforge new shop mysql
    layerforge generate controller payment
    layerforge module order
    python -m layerforge -C ./shop module order
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from layerforge.config import GeneratorConfig
from layerforge.scaffolder import (
    DatabaseKind,
    GenerationRequest,
    RequestKind,
    ScaffoldError,
    ScaffoldResult,
    execute,
)
from layerforge.utils import (
    print_error,
    print_files_table,
    print_info,
    print_success,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layerforge",
        description="Generate Go projects laid out in Clean Architecture layers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  layerforge new shop mysql\n"
            "  layerforge generate controller payment\n"
            "  layerforge -C ./shop module order\n"
        ),
    )
    parser.add_argument(
        "--dir", "-C",
        type=Path,
        default=None,
        help="Run as if started in this directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON generator config (default: read LAYERFORGE_* environment variables)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="Create a new project")
    new.add_argument("project_name", help="Project name, also the Go module path")
    new.add_argument("database", help="Database kind: postgres or mysql")

    generate = commands.add_parser(
        "generate", help="Generate one component (controller/repository/usecase)"
    )
    generate.add_argument("component_kind", help="controller, repository or usecase")
    generate.add_argument("name", help="Component name")

    module = commands.add_parser(
        "module", help="Generate a full module (model, controller, repository, usecase)"
    )
    module.add_argument("module_name", help="Entity name, e.g. order")

    return parser


def _load_config(path: Path | None) -> GeneratorConfig:
    if path is not None:
        return GeneratorConfig.load(path)
    return GeneratorConfig.from_env()


def _request_from_args(args: argparse.Namespace) -> GenerationRequest:
    target = (args.dir or Path.cwd()).resolve()
    if args.command == "new":
        return GenerationRequest(
            kind=RequestKind.PROJECT,
            name=args.project_name,
            database_kind=args.database,
            target_path=target,
        )
    if args.command == "generate":
        return GenerationRequest(
            kind=RequestKind.COMPONENT,
            name=args.name,
            component_kind=args.component_kind,
            target_path=target,
        )
    return GenerationRequest(
        kind=RequestKind.MODULE,
        name=args.module_name,
        target_path=target,
    )


def _report(request: GenerationRequest, result: ScaffoldResult, config: GeneratorConfig) -> None:
    if request.kind is RequestKind.PROJECT:
        print_success(f"Project {request.name} created at {result.root}")
        print_success(f"Default module {config.default_module} created")
    elif request.kind is RequestKind.MODULE:
        print_success(f"Module {request.name} created")
    else:
        print_success(f"Component {result.relative_files()[0]} created")
    print_files_table(result.relative_files())


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``layerforge`` and ``python -m layerforge``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args.config)
    except (OSError, ValidationError, ValueError) as exc:
        print_error(f"invalid configuration: {exc}")
        sys.exit(1)

    request = _request_from_args(args)

    if request.kind is RequestKind.PROJECT:
        print_info(f"Creating project {request.name} with database {request.database_kind}")
        if not DatabaseKind.is_known(request.database_kind or ""):
            print_warning(
                f"Unknown database {request.database_kind!r}; using postgres"
            )
    elif request.kind is RequestKind.MODULE:
        print_info(f"Creating module {request.name} ({request.resolved_import_path})")
    else:
        print_info(f"Generating {request.component_kind}: {request.name}")

    try:
        result = asyncio.run(execute(request, config))
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    _report(request, result, config)


if __name__ == "__main__":
    main()
