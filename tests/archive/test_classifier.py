# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for archive entry classification."""

import pytest

from joinport.archive import (
    DEFAULT_RULES,
    RawEntry,
    categorize,
    classify,
    classify_archive,
    is_auto_excluded,
    split_name,
)
from joinport.model import Category

# ###############
# Helpers
# ###############


def _classify_path(path: str) -> tuple[Category, bool]:
    raw = RawEntry.from_path(path)
    return classify(raw.path, raw.name, raw.extension)


# ###############
# Names
# ###############


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("src/App.tsx", ("App.tsx", "tsx")),
        ("Logo.PNG", ("Logo.PNG", "png")),
        ("types/index.d.ts", ("index.d.ts", "ts")),
        ("Makefile", ("Makefile", "")),
        ("a/b/c/", ("c", "")),
    ],
)
def test_split_name(path: str, expected: tuple[str, str]) -> None:
    assert split_name(path) == expected


def test_raw_entry_from_path() -> None:
    raw = RawEntry.from_path("src/styles/main.css", size_bytes=42)
    assert (raw.name, raw.extension, raw.size_bytes) == ("main.css", "css", 42)


# ###############
# Exclusion
# ###############


@pytest.mark.parametrize(
    "path",
    [
        "node_modules/react/index.js",
        "app/node_modules/x/y.tsx",
        "dist/bundle.js",
        ".git/HEAD",
        "src/.hidden/Thing.tsx",
        "package-lock.json",
        "README.md",
        "src/App.test.tsx",
        "src/Button.stories.tsx",
        "types/global.d.ts",
        "fonts/Inter.woff2",
        "src/app.js.map",
        ".env",
    ],
)
def test_auto_excluded_paths(path: str) -> None:
    """Tooling, build output, tests, hidden files and binary media are excluded."""
    assert _classify_path(path) == (Category.JUNK, True)


@pytest.mark.parametrize("path", ["src/App.tsx", "src/utils/format.ts", "public/logo.svg", "data/rooms.json"])
def test_regular_paths_are_not_excluded(path: str) -> None:
    raw = RawEntry.from_path(path)
    assert is_auto_excluded(raw.path, raw.name, raw.extension) is False


def test_extended_rules_exclude_more() -> None:
    """Rules can be extended with project-specific directory and file names."""
    rules = DEFAULT_RULES.extended(dirs=["legacy"], files=["Notes.tsx"])

    assert is_auto_excluded("legacy/Old.tsx", "Old.tsx", "tsx", rules) is True
    assert is_auto_excluded("src/Notes.tsx", "Notes.tsx", "tsx", rules) is True
    assert is_auto_excluded("legacy/Old.tsx", "Old.tsx", "tsx") is False


# ###############
# Categories
# ###############


@pytest.mark.parametrize(
    ("path", "extension", "expected"),
    [
        ("src/App.tsx", "tsx", Category.COMPONENT),
        ("src/Card.jsx", "jsx", Category.COMPONENT),
        ("src/Panel.ts", "ts", Category.COMPONENT),
        ("src/utils/format.ts", "ts", Category.DATA),
        ("src/lib/api.js", "js", Category.DATA),
        ("src/helpers/dates.js", "js", Category.DATA),
        ("src/config/routes.ts", "ts", Category.CONFIG),
        ("src/config/Menu.tsx", "tsx", Category.COMPONENT),
        ("src/main.scss", "scss", Category.STYLE),
        ("src/theme.css", "css", Category.STYLE),
        ("data/rooms.json", "json", Category.DATA),
        ("data/site.yml", "yml", Category.DATA),
        ("public/logo.svg", "svg", Category.ASSET),
        ("public/photo.jpeg", "jpeg", Category.ASSET),
        ("docs/notes.txt", "txt", Category.OTHER),
        ("LICENSE-THIRD-PARTY", "", Category.OTHER),
    ],
)
def test_categorize(path: str, extension: str, expected: Category) -> None:
    assert categorize(path, extension) == expected


# ###############
# Default Selection
# ###############


def test_classify_archive_default_selection() -> None:
    """Components are selected; dependencies, lock files and readmes are excluded."""
    raw = [
        RawEntry.from_path("src/App.tsx", 120),
        RawEntry.from_path("node_modules/react/index.js", 900),
        RawEntry.from_path("package-lock.json", 5000),
        RawEntry.from_path("README.md", 30),
    ]
    entries = classify_archive(raw)

    by_path = {entry.path: entry for entry in entries}
    app = by_path["src/App.tsx"]
    assert (app.category, app.auto_excluded, app.selected) == (Category.COMPONENT, False, True)
    assert app.size_bytes == 120
    for path in ("node_modules/react/index.js", "package-lock.json", "README.md"):
        assert by_path[path].auto_excluded is True
        assert by_path[path].selected is False
        assert by_path[path].category == Category.JUNK


def test_classify_archive_keeps_order() -> None:
    paths = ["b.tsx", "a.css", "c/d.json"]
    assert [entry.path for entry in classify_archive(RawEntry.from_path(p) for p in paths)] == paths


def test_config_and_other_are_not_preselected() -> None:
    """Only component, style, data and asset entries start selected."""
    entries = classify_archive(
        [RawEntry.from_path("src/config/routes.ts"), RawEntry.from_path("docs/notes.txt")]
    )
    assert [(entry.category, entry.selected) for entry in entries] == [
        (Category.CONFIG, False),
        (Category.OTHER, False),
    ]


def test_selected_entries_are_never_excluded() -> None:
    paths = ["src/A.tsx", ".git/config", "dist/x.js", "src/a.css", "img/p.png", "x.map", "y.json"]
    for entry in classify_archive(RawEntry.from_path(p) for p in paths):
        assert not (entry.selected and entry.auto_excluded)
