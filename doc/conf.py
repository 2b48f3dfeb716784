import sys
import os.path

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

import scubagas

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.todo', 'sphinx.ext.viewcode', 'sphinx.ext.mathjax'
]
project = 'scubagas'
source_suffix = '.rst'
master_doc = 'index'

version = release = scubagas.__version__
copyright = 'ScubaGas Team'

epub_basename = 'scubagas - {}'.format(version)
epub_author = 'ScubaGas Team'

todo_include_todos = True

html_theme = 'sphinx_rtd_theme'


# vim: sw=4:et:ai
