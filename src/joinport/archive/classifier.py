# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rule-based classification of archive entries.

Every entry gets exactly one :class:`~joinport.model.types.Category` and an
auto-exclude flag. Excluded entries (build output, VCS metadata, lockfiles,
tests, binaries, ...) are categorised as ``JUNK`` and never pre-selected.
Classification is a pure function of the entry's path, name, extension and
the rule tables.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from joinport.model.entities import ArchiveEntry
from joinport.model.types import Category

# ###############
# Public Interface
# ###############

EXCLUDED_DIRS: frozenset[str] = frozenset(
    {
        ".git", ".svn", ".hg", "node_modules", ".next", ".nuxt", ".cache",
        "dist", "build", "out", ".turbo", ".vercel", ".netlify",
        "__pycache__", ".vscode", ".idea", ".DS_Store", "coverage",
        ".parcel-cache", ".webpack", "tmp", "temp",
    }
)  # fmt: skip

EXCLUDED_FILES: frozenset[str] = frozenset(
    {
        "package-lock.json", "yarn.lock", "pnpm-lock.yaml", "bun.lockb",
        ".gitignore", ".gitattributes", ".npmrc", ".nvmrc", ".editorconfig",
        ".eslintrc", ".eslintrc.js", ".eslintrc.json", ".eslintrc.cjs",
        ".prettierrc", ".prettierrc.js", ".prettierrc.json", ".prettierignore",
        "tsconfig.json", "tsconfig.node.json", "tsconfig.app.json",
        "vite.config.ts", "vite.config.js", "webpack.config.js", "next.config.js",
        "next.config.mjs", "next.config.ts", "postcss.config.js", "postcss.config.cjs",
        "tailwind.config.js", "tailwind.config.ts", "tailwind.config.cjs",
        "jest.config.js", "jest.config.ts", "vitest.config.ts",
        "babel.config.js", ".babelrc", "rollup.config.js",
        "Dockerfile", "docker-compose.yml", "docker-compose.yaml",
        ".env", ".env.local", ".env.development", ".env.production",
        "LICENSE", "LICENSE.md", "CHANGELOG.md", "CONTRIBUTING.md",
        "Makefile", "Procfile", ".dockerignore", "renovate.json",
        "README", "README.md", "README.txt",
    }
)  # fmt: skip

EXCLUDED_EXTENSIONS: frozenset[str] = frozenset(
    {
        "map", "lock", "log", "pid", "seed", "swp", "swo",
        "pyc", "pyo", "class", "o", "so", "dll", "exe",
        # fonts
        "woff", "woff2", "eot", "ttf", "otf",
        # video
        "mp4", "webm", "mov", "avi",
        # audio
        "mp3", "wav", "ogg", "flac",
    }
)  # fmt: skip

EXCLUDED_SUFFIXES: tuple[str, ...] = (
    ".test.tsx", ".test.ts", ".test.js",
    ".spec.tsx", ".spec.ts", ".spec.js",
    ".stories.tsx", ".stories.ts",
    ".d.ts",
)  # fmt: skip

PRESELECTED_CATEGORIES: frozenset[Category] = frozenset(
    {Category.COMPONENT, Category.STYLE, Category.DATA, Category.ASSET}
)


@dataclass(frozen=True)
class RawEntry:
    """A file entry as enumerated from an archive, before classification."""

    path: str
    name: str
    extension: str
    size_bytes: int = 0

    @classmethod
    def from_path(cls, path: str, size_bytes: int = 0) -> RawEntry:
        """Derive name and extension from an archive path."""
        name, extension = split_name(path)
        return cls(path=path, name=name, extension=extension, size_bytes=size_bytes)


@dataclass(frozen=True)
class ClassifierRules:
    """The deny lists used to auto-exclude entries."""

    excluded_dirs: frozenset[str] = EXCLUDED_DIRS
    excluded_files: frozenset[str] = EXCLUDED_FILES
    excluded_extensions: frozenset[str] = EXCLUDED_EXTENSIONS
    excluded_suffixes: tuple[str, ...] = EXCLUDED_SUFFIXES

    def extended(self, dirs: Iterable[str] = (), files: Iterable[str] = ()) -> ClassifierRules:
        """Return a copy with additional excluded directory and file names."""
        return replace(
            self,
            excluded_dirs=self.excluded_dirs | frozenset(dirs),
            excluded_files=self.excluded_files | frozenset(files),
        )


DEFAULT_RULES = ClassifierRules()


def split_name(path: str) -> tuple[str, str]:
    """Return the last path segment and its lower-cased extension ('' when absent)."""
    name = path.rstrip("/").rsplit("/", 1)[-1]
    extension = name.rsplit(".", 1)[1].lower() if "." in name else ""
    return name, extension


def is_auto_excluded(path: str, name: str, extension: str, rules: ClassifierRules = DEFAULT_RULES) -> bool:
    """Return True if the entry should be hidden and deselected by default."""
    for part in path.split("/"):
        if part in rules.excluded_dirs:
            return True
        if part.startswith(".") and part != ".":
            return True
    if name in rules.excluded_files:
        return True
    if extension in rules.excluded_extensions:
        return True
    return name.endswith(rules.excluded_suffixes) or name.startswith(".")


def categorize(path: str, extension: str) -> Category:
    """Return the category of a non-excluded entry."""
    if extension in _UI_MARKUP_EXTENSIONS:
        return Category.COMPONENT
    if extension in _SCRIPT_EXTENSIONS:
        if any(marker in path for marker in _HELPER_DIR_MARKERS):
            return Category.DATA
        if "config" in path:
            return Category.CONFIG
        return Category.COMPONENT
    if extension in _STYLE_EXTENSIONS:
        return Category.STYLE
    if extension in _DATA_EXTENSIONS:
        return Category.DATA
    if extension in _IMAGE_EXTENSIONS:
        return Category.ASSET
    return Category.OTHER


def classify(
    path: str, name: str, extension: str, rules: ClassifierRules = DEFAULT_RULES
) -> tuple[Category, bool]:
    """Return ``(category, auto_excluded)`` for one entry."""
    if is_auto_excluded(path, name, extension, rules):
        return Category.JUNK, True
    return categorize(path, extension), False


def classify_archive(entries: Iterable[RawEntry], rules: ClassifierRules = DEFAULT_RULES) -> list[ArchiveEntry]:
    """Classify archive file entries and compute their default selection.

    An entry is selected by default when it is not auto-excluded and its
    category is one of ``PRESELECTED_CATEGORIES``.
    """
    classified: list[ArchiveEntry] = []
    for raw in entries:
        category, excluded = classify(raw.path, raw.name, raw.extension, rules)
        classified.append(
            ArchiveEntry(
                path=raw.path,
                name=raw.name,
                extension=raw.extension,
                size_bytes=raw.size_bytes,
                category=category,
                auto_excluded=excluded,
                selected=not excluded and category in PRESELECTED_CATEGORIES,
            )
        )
    return classified


# ################
# Implementation
# ################

_UI_MARKUP_EXTENSIONS = frozenset({"tsx", "jsx"})
_SCRIPT_EXTENSIONS = frozenset({"ts", "js"})
_STYLE_EXTENSIONS = frozenset({"css", "scss", "sass", "less", "styl"})
_DATA_EXTENSIONS = frozenset({"json", "yaml", "yml", "toml"})
_IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "svg", "webp", "ico", "avif"})

_HELPER_DIR_MARKERS = ("utils/", "lib/", "helpers/")
