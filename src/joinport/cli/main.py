# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the joinport command-line interface."""

import argparse
import asyncio
import fnmatch
import sys
from pathlib import Path

from yachalk import chalk

from joinport.archive import (
    ArchiveError,
    ArchiveTree,
    SelectionState,
    TreeFilter,
    classify_archive,
    detect_project_files,
    format_size,
    open_archive,
)
from joinport.extractor import detect_join_pattern, parse_join_list, parse_source
from joinport.library import import_files, merge_import
from joinport.logging import configure_logging
from joinport.model import ArchiveEntry, Category, ImportResult, Project, ResultKind
from joinport.workspace import (
    CONFIG_FILE_NAME,
    DEFAULT_PROJECT_FILE,
    ImportConfig,
    ImportConfigError,
    ProjectFileError,
    load_import_config,
    load_project,
    save_project,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the joinport CLI."""
    parser = argparse.ArgumentParser(
        prog="joinport",
        description="joinport - import UI source code into control-system projects",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print debug diagnostics",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create an empty project file",
        description="Write an empty joinport project file.",
    )
    init_parser.add_argument(
        "project",
        nargs="?",
        default=DEFAULT_PROJECT_FILE,
        help=f"Project file to create (default: {DEFAULT_PROJECT_FILE})",
    )

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Show the components found in a source file",
        description="Extract components, declared props and detected elements from a source file.",
    )
    scan_parser.add_argument("file", help="Source file (.tsx, .jsx, .ts, .js)")

    # explore subcommand
    explore_parser = subparsers.add_parser(
        "explore",
        help="Classify the contents of a ZIP archive",
        description="Print the classified archive tree with its default selection.",
    )
    explore_parser.add_argument("archive", help="ZIP archive to explore")
    explore_parser.add_argument(
        "--search",
        default="",
        help="Only show paths containing this text (case-insensitive)",
    )
    explore_parser.add_argument(
        "--category",
        choices=[category.value for category in Category],
        help="Only show entries of this category",
    )
    explore_parser.add_argument(
        "--show-excluded",
        action="store_true",
        help="Also show auto-excluded entries",
    )

    # import subcommand
    import_parser = subparsers.add_parser(
        "import",
        help="Import a ZIP archive or loose files into a project",
        description=(
            "Import a ZIP archive through classification and the default selection, "
            "or import loose project, template, library and source files."
        ),
    )
    import_parser.add_argument("sources", nargs="+", metavar="SOURCE", help="ZIP archive or files to import")
    import_parser.add_argument("--project", required=True, help="Project file to update")
    target_group = import_parser.add_mutually_exclusive_group()
    target_group.add_argument("--library-id", help="Append components to the library with this id")
    target_group.add_argument("--library-name", help="Name of the library to create")
    import_parser.add_argument(
        "--config",
        help=f"Import configuration file (default: {CONFIG_FILE_NAME} next to the project file)",
    )
    import_parser.add_argument(
        "--include",
        action="append",
        default=[],
        metavar="GLOB",
        help="Select only archive paths matching GLOB (repeatable)",
    )
    import_parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="Deselect archive paths matching GLOB (repeatable)",
    )

    # joins subcommand
    joins_parser = subparsers.add_parser(
        "joins",
        help="Read joins from an existing control-system program",
        description="Parse a join list and report the joins and their numbering pattern.",
    )
    joins_parser.add_argument("file", help="Program or join list file")

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the archive explorer in a browser",
        description="Launch a read-only web view of a classified ZIP archive.",
    )
    serve_parser.add_argument("archive", help="ZIP archive to explore")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(verbose=args.verbose)
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_SELECTION_MARKERS = {
    SelectionState.ALL: "[x]",
    SelectionState.NONE: "[ ]",
    SelectionState.PARTIAL: "[-]",
}

_RESULT_STYLES = {
    ResultKind.SUCCESS: chalk.green,
    ResultKind.WARNING: chalk.yellow,
    ResultKind.ERROR: chalk.red,
}


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "scan":
        return _cmd_scan(args)
    if args.command == "explore":
        return _cmd_explore(args)
    if args.command == "import":
        return _cmd_import(args)
    if args.command == "joins":
        return _cmd_joins(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    project_file = Path(args.project)

    if project_file.exists():
        print(f"Error: project file '{project_file}' already exists.", file=sys.stderr)
        return 1
    if not project_file.parent.exists():
        print(f"Error: directory '{project_file.parent}' does not exist.", file=sys.stderr)
        return 1

    try:
        save_project(Project(), project_file)
    except ProjectFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Initialized joinport project at '{project_file}'.")
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand."""
    source_file = Path(args.file)
    try:
        text = source_file.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        print(f"Error: cannot read '{source_file}': {exc}", file=sys.stderr)
        return 1

    result = parse_source(text)
    print(f"{source_file.name}: {len(result.components)} component(s)")
    for component in result.components:
        props = ", ".join(component.declared_props) or "-"
        print(f"  {chalk.bold(component.name)}  props: {props}")
        for element in component.detected_elements:
            kind = "interactive" if element.interactive else "display"
            print(
                f"    <{element.tag}> {element.display_name} ({kind}): "
                f"{element.suggested_join_type.value} {element.suggested_direction.value} "
                f"#{element.suggested_join_number}"
            )
    return 0


def _cmd_explore(args: argparse.Namespace) -> int:
    """Handle the explore subcommand."""
    try:
        with open_archive(Path(args.archive)) as archive:
            entries = classify_archive(archive.raw_entries())
            candidates = asyncio.run(detect_project_files(archive, entries))
    except ArchiveError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    tree = ArchiveTree.from_entries(entries)
    tree_filter = TreeFilter(
        search=args.search,
        category=Category(args.category) if args.category else None,
        show_excluded=args.show_excluded,
    )
    view = tree.view(tree_filter)
    if view.is_empty:
        print("No files match the current filter.")
    for entry in view.root_files:
        print(_format_entry(entry))
    for group in view.directories:
        indent = "  " * group.depth
        print(f"{indent}{_SELECTION_MARKERS[group.selection]} {group.path} ({len(group.files)})")
        if group.expanded:
            for entry in group.files:
                print(f"{indent}  {_format_entry(entry)}")

    stats = tree.stats()
    print()
    print(
        f"{stats.selected_count} of {stats.usable_count} usable files selected "
        f"({format_size(stats.selected_size)}), {stats.excluded_count} auto-excluded"
    )
    ordered = sorted(stats.category_counts.items(), key=lambda item: item[0].value)
    counts = ", ".join(f"{category.value}: {count}" for category, count in ordered)
    if counts:
        print(f"Categories: {counts}")
    for candidate in candidates:
        print(
            f"Detected {candidate.kind} '{candidate.name}' in {candidate.path}: "
            f"{candidate.page_count} pages, {candidate.element_count} elements"
        )
    return 0


def _cmd_import(args: argparse.Namespace) -> int:
    """Handle the import subcommand."""
    project_file = Path(args.project)
    try:
        project = load_project(project_file) if project_file.exists() else Project()
    except ProjectFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    config_file = Path(args.config) if args.config else project_file.parent / CONFIG_FILE_NAME
    try:
        config = load_import_config(config_file) if args.config or config_file.exists() else ImportConfig()
    except ImportConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sources = list(args.sources)
    if len(sources) == 1 and sources[0].lower().endswith(".zip"):
        try:
            results = _import_archive(project, Path(sources[0]), config, args)
        except ArchiveError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        results = asyncio.run(import_files(project, sources, size=config.size))

    for result in results:
        _print_result(result)

    try:
        save_project(project, project_file)
    except ProjectFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Saved project to '{project_file}'.")

    return 1 if any(result.kind == ResultKind.ERROR for result in results) else 0


def _import_archive(
    project: Project,
    archive_path: Path,
    config: ImportConfig,
    args: argparse.Namespace,
) -> list[ImportResult]:
    """Classify an archive, apply the path globs and merge the selection into *project*."""
    with open_archive(archive_path) as archive:
        entries = classify_archive(archive.raw_entries(), config.classifier_rules)
        tree = _apply_globs(ArchiveTree.from_entries(entries), args.include, args.exclude)
        return asyncio.run(
            merge_import(
                project,
                tree.selected(),
                archive.reader,
                target_library_id=args.library_id,
                new_library_name=args.library_name or config.library_name,
                size=config.size,
            )
        )


def _apply_globs(tree: ArchiveTree, include: list[str], exclude: list[str]) -> ArchiveTree:
    """Narrow the default selection with include and exclude path globs.

    With include globs only matching entries stay selected; exclude globs then
    deselect. Auto-excluded entries are never selected.
    """
    if include:
        tree = tree.select_all(False)
        for entry in tree.entries:
            if _matches_any(entry.path, include):
                tree = tree.toggle_entry(entry.path)
    for entry in tree.entries:
        if entry.selected and _matches_any(entry.path, exclude):
            tree = tree.toggle_entry(entry.path)
    return tree


def _matches_any(path: str, patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(path, pattern) for pattern in patterns)


def _cmd_joins(args: argparse.Namespace) -> int:
    """Handle the joins subcommand."""
    join_file = Path(args.file)
    try:
        text = join_file.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        print(f"Error: cannot read '{join_file}': {exc}", file=sys.stderr)
        return 1

    imported = parse_join_list(text, join_file.name)
    if not imported.joins:
        print(f"No joins found in '{join_file.name}'.")
        return 0

    for join in imported.joins:
        print(f"  {join.type.value:<8} {join.number:>5}  {join.description}")
    pattern = detect_join_pattern(imported.joins)
    layout = "contiguous" if pattern.contiguous else "non-contiguous"
    print(f"{len(imported.joins)} joins, {layout}, range {pattern.minimum}-{pattern.maximum}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    archive_path = Path(args.archive).resolve()

    if not archive_path.exists():
        print(f"Error: archive '{archive_path}' does not exist.", file=sys.stderr)
        return 1

    from joinport.webui.app import create_app

    print(f"Serving archive explorer at http://{args.host}:{args.port}/")
    app = create_app(archive_path=archive_path)
    app.run(host=args.host, port=args.port, debug=False)
    return 0


def _format_entry(entry: ArchiveEntry) -> str:
    """One tree line for a file: marker, name, category and size."""
    marker = "[x]" if entry.selected else "[ ]"
    line = f"{marker} {entry.name}  {entry.category.value}  {format_size(entry.size_bytes)}"
    if entry.auto_excluded:
        return chalk.gray(f"{line}  (excluded)")
    return line


def _print_result(result: ImportResult) -> None:
    """Print one import log record, coloured by kind."""
    style = _RESULT_STYLES[result.kind]
    print(f"{style(result.kind.value.upper())} {result.message}")
    if result.details:
        print(f"    {result.details}")
