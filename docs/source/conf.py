"""Sphinx configuration for seqalign documentation."""

import os
import sys

# Make the src layout importable for autodoc
sys.path.insert(0, os.path.abspath("../../src"))

project = "seqalign"
copyright = "2026, seqalign contributors"
author = "seqalign contributors"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx_click",
]

# Docstrings are Google style
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = False
napoleon_use_rtype = True

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "special-members": "__call__",
    "show-inheritance": True,
}
autodoc_typehints = "description"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "biopython": ("https://biopython.org/docs/latest/", None),
    "click": ("https://click.palletsprojects.com/en/stable/", None),
}

exclude_patterns = ["_build"]

html_theme = "sphinx_rtd_theme"
html_theme_options = {"navigation_depth": 3}
