"""
Markdown rendering: formatting survives, raw HTML and unsafe links do not.
"""

from markupsafe import Markup

from theme.markdown import reading_time, render_markdown_safe


def test_empty_input():
    assert render_markdown_safe('') == Markup('')
    assert render_markdown_safe(None) == Markup('')


def test_basic_formatting():
    html = render_markdown_safe('# Title\n\nSome **bold** and *em* text.')
    assert '<h1>Title</h1>' in html
    assert '<strong>bold</strong>' in html
    assert '<em>em</em>' in html


def test_returns_markup():
    assert isinstance(render_markdown_safe('text'), Markup)


def test_raw_html_is_escaped():
    html = render_markdown_safe('<script>alert(1)</script>')
    assert '<script>' not in html
    assert '&lt;script&gt;' in html


def test_javascript_links_are_not_rendered_as_links():
    html = render_markdown_safe('[click](javascript:alert(1))')
    assert 'href="javascript' not in html


def test_tables_are_supported():
    html = render_markdown_safe('| a | b |\n|---|---|\n| 1 | 2 |')
    assert '<table>' in html
    assert '<td>1</td>' in html


def test_reading_time():
    assert reading_time('') == 1
    assert reading_time('word ' * 200) == 1
    assert reading_time('word ' * 201) == 2
    assert reading_time('word ' * 1000) == 5
