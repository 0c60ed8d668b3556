# Configuration file for the Sphinx documentation builder.

import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

# -- Project information -----------------------------------------------------

project = "rule_grammar"
copyright = "2020, rule_grammar developers"
author = "rule_grammar developers"

from rule_grammar import __version__ as version

release = version

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.doctest",
    "numpydoc",
    "sphinxcontrib.programoutput",
]

numpydoc_show_class_members = False

autodoc_member_order = "bysource"

add_module_names = False

intersphinx_mapping = {
    "python": ("http://docs.python.org/3", None),
}

# -- Options for HTML output -------------------------------------------------

html_theme = "nature"
