"""
Pages Package - Page definitions composed from theme sections
Each page is a function without arguments returning a PageDefinition.
"""

from .index import index_page, remote_index_page

PAGES = {
    'index': index_page,
    'index-remote': remote_index_page,
}


def get_page(name):
    """Return the page assembler registered under name (KeyError if unknown)"""
    return PAGES[name]


__all__ = ['PAGES', 'get_page', 'index_page', 'remote_index_page']
