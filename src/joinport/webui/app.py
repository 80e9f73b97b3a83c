# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based read-only explorer for classified archives."""

from pathlib import Path

import dash
from dash import html

from joinport.archive import (
    ArchiveError,
    ArchiveTree,
    DirectoryGroup,
    SelectionState,
    TreeStats,
    classify_archive,
    format_size,
    open_archive,
)
from joinport.model import ArchiveEntry

# ###############
# Public Interface
# ###############

APP_TITLE = "Joinport Archive Explorer"


def create_app(archive_path: Path) -> dash.Dash:
    """Create and configure the archive explorer application."""
    app = dash.Dash(
        __name__,
        title=APP_TITLE,
    )
    app.layout = _build_layout(archive_path)
    return app


# ################
# Implementation
# ################

_MARKERS = {
    SelectionState.ALL: "[x]",
    SelectionState.NONE: "[ ]",
    SelectionState.PARTIAL: "[-]",
}


def _build_layout(archive_path: Path) -> html.Div:
    """Build the application layout."""
    try:
        with open_archive(archive_path) as archive:
            tree = ArchiveTree.from_entries(classify_archive(archive.raw_entries()))
    except ArchiveError as exc:
        body = [html.P(f"Error: {exc}", className="error", style={"color": "#b00020"})]
    else:
        body = [_build_stats(tree.stats()), html.Hr(), _build_tree(tree)]

    return html.Div(
        [
            html.H1(APP_TITLE),
            html.P(f"Archive: {archive_path}"),
            *body,
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


def _build_stats(stats: TreeStats) -> html.Div:
    categories = [
        html.Li(f"{category.value}: {count}")
        for category, count in sorted(stats.category_counts.items(), key=lambda item: item[0].value)
    ]
    return html.Div(
        [
            html.P(
                f"{stats.usable_count} usable files, {stats.excluded_count} auto-excluded. "
                f"{stats.selected_count} selected ({format_size(stats.selected_size)})."
            ),
            html.Ul(categories, className="categories"),
        ]
    )


def _build_tree(tree: ArchiveTree) -> html.Div:
    view = tree.view()
    if view.is_empty:
        return html.Div(html.P("No usable files in this archive.", style={"color": "#666"}))
    children = [_build_file(entry) for entry in view.root_files]
    children.extend(_build_group(group) for group in view.directories)
    return html.Div(children, className="tree", style={"fontFamily": "monospace"})


def _build_group(group: DirectoryGroup) -> html.Div:
    header = html.Div(f"{_MARKERS[group.selection]} {group.path} ({len(group.files)})", style={"fontWeight": "bold"})
    files = [_build_file(entry) for entry in group.files] if group.expanded else []
    return html.Div([header, *files], style={"marginLeft": f"{group.depth * 1.5}rem"})


def _build_file(entry: ArchiveEntry) -> html.Div:
    marker = "[x]" if entry.selected else "[ ]"
    return html.Div(
        f"{marker} {entry.name}  {entry.category.value}  {format_size(entry.size_bytes)}",
        style={"marginLeft": "1.5rem"},
    )
