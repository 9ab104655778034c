# Configuration file for the Sphinx documentation builder.
import os
import sys
from datetime import datetime

# Make the symmetrix package importable for autodoc
sys.path.insert(0, os.path.abspath(".."))

import symmetrix

# Project information
project = "symmetrix"
author = "symmetrix Contributors"
copyright = f"{datetime.now().year}, {author}"
version = symmetrix.__version__
release = symmetrix.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",
    "sphinx.ext.mathjax",
    "sphinx.ext.intersphinx",
    "sphinx.ext.doctest",
    "sphinx_rtd_theme",
    "myst_parser",
]

# Docstrings are Google style
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_include_private_with_doc = False
napoleon_include_special_with_doc = False
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_attr_annotations = True

autodoc_member_order = "bysource"
autodoc_typehints = "description"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
}

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]
html_show_sourcelink = True

if not os.path.exists("_static"):
    os.makedirs("_static")
