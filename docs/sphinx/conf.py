# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for joinport documentation."""

project = "Joinport"
author = "Joinport Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
