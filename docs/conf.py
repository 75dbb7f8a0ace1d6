# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = 'PyFreqStats'
copyright = '2026, SGCX'
author = 'Hai-Shuo'
version = '0.1.0'
release = '0.1.0'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

# Docstrings mix Google (core) and NumPy (solvers) styles
napoleon_google_docstrings = True
napoleon_numpy_docstrings = True
napoleon_include_init_with_doc = True

autodoc_member_order = 'bysource'
autodoc_typehints = 'description'

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store',
                    'DESIGN.md', 'SPEC_FULL.md']

# -- Options for HTML output -------------------------------------------------

html_theme = 'furo'
html_title = 'PyFreqStats API Reference'

html_theme_options = {
    'light_css_variables': {
        'color-brand-primary': '#27ae60',
        'color-brand-content': '#1a7a3a',
    },
    'dark_css_variables': {
        'color-brand-primary': '#2ecc71',
        'color-brand-content': '#27ae60',
    },
}

# -- Intersphinx configuration -----------------------------------------------

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
}
