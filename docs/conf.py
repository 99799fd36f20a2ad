# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = 'savvystats'
author = 'savvystats developers'
copyright = '2026, savvystats developers'
release = '0.1.0'

# Family modules and kernels carry NumPy-style docstrings; the result
# dataclasses list their fields in an "Attributes:" block.
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
]

napoleon_google_docstrings = True
napoleon_numpy_docstrings = True

autodoc_member_order = 'bysource'
autodoc_typehints = 'description'

exclude_patterns = ['_build']

html_theme = 'furo'
html_title = 'savvystats'

# ArrayLike / NDArray in the descriptive signatures
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
}
