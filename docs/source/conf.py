# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html
import os
import sys
from datetime import date

import numpydoc.docscrape as np_docscrape

sys.path.append(os.path.abspath("../../src"))

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = "thermoweb"
copyright = f"{date.today().year}, thermoweb developers"
author = "thermoweb developers"


# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration


nitpicky = True

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    # links to other project's documentation
    "sphinx.ext.intersphinx",
    # numpy style docstring parser
    "numpydoc",
    # links to project code
    "sphinx.ext.viewcode",
    # copy button in the code cells
    "sphinx_copybutton",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/devdocs", None),
    "scipy": ("https://docs.scipy.org/doc/scipy", None),
    "matplotlib": ("https://matplotlib.org/stable", None),
}

add_function_parentheses = False

# Do not show type hints in function signature
autodoc_typehints = "none"

autosummary_generate = True

numpydoc_class_members_toctree = False

np_docscrape.ClassDoc.extra_public_methods = [
    "__getitem__",
]

# The reST default role (used for this markup: `text`) to use for all documents.
default_role = "autolink"

# Do not copy prompts and outputs from code fragments
copybutton_exclude = ".linenos, .gp, .go"


templates_path = ["_templates"]
exclude_patterns = []

# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = "pydata_sphinx_theme"
html_static_path = ["_static"]
html_title = f"{project} documentation"

html_theme_options = {
    "navigation_with_keys": False,
}
