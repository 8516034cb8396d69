"""
Article sources: local blog markdown, the Medium feed and merging.
"""

from datetime import date

import pytest
import requests

from theme import ContentRepository, UnknownArticleSourceError
from theme import articles as theme_articles
from theme.articles import BlogSource, MediumSource, latest_articles

from conftest import write_text


MEDIUM_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
<channel>
    <title>Stories by Test Author on Medium</title>
    <item>
        <title><![CDATA[Older Medium Story]]></title>
        <link>https://medium.com/@tester/older-medium-story-abc123?source=rss</link>
        <pubDate>Mon, 01 May 2023 10:00:00 GMT</pubDate>
        <category>angular</category>
        <category>typescript</category>
    </item>
    <item>
        <title>Newest Medium Story</title>
        <link>https://medium.com/@tester/newest-medium-story-def456</link>
        <pubDate>Fri, 01 Mar 2024 10:00:00 GMT</pubDate>
    </item>
    <item>
        <title>Story without date</title>
        <link>https://medium.com/@tester/no-date</link>
    </item>
</channel>
</rss>
"""


class FakeResponse:
    def __init__(self, content=b'', status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def content(content_dir):
    return ContentRepository(content_dir)


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


def test_blog_articles_newest_first_without_drafts(app_ctx, content):
    articles = BlogSource().fetch(content)
    assert [a.slug for a in articles] == ['second-post', 'first-post']
    first = articles[1]
    assert first.title == 'First Post'
    assert first.description == 'The first one.'
    assert first.date == date(2023, 1, 10)
    assert first.categories == ('Python',)
    assert first.url == '/blog/first-post'
    assert first.source == 'Blog'
    assert first.reading_time == 1


def test_blog_article_slug_override_and_invalid_entries(app_ctx, content, content_dir):
    write_text(content_dir / 'articles' / 'file-name.md', """
        ---
        title: Custom Slug
        slug: custom
        date: "2023-03-03"
        ---
        Text.
    """)
    write_text(content_dir / 'articles' / 'no-date.md', """
        ---
        title: No Date
        ---
        Text.
    """)
    slugs = [a.slug for a in BlogSource().fetch(content)]
    assert 'custom' in slugs
    assert 'file-name' not in slugs
    assert 'no-date' not in slugs


def test_blog_get_by_slug(app_ctx, content):
    source = BlogSource()
    assert source.get(content, 'second-post').title == 'Second Post'
    assert source.get(content, 'draft-post') is None
    assert source.get(content, 'missing') is None


def test_blog_without_articles_dir(app_ctx, tmp_path):
    assert BlogSource().fetch(ContentRepository(tmp_path)) == []


def test_medium_parse_feed():
    articles = MediumSource().parse_feed(MEDIUM_FEED)
    assert [a.title for a in articles] == ['Newest Medium Story', 'Older Medium Story']
    older = articles[1]
    assert older.slug == 'older-medium-story-abc123'
    assert older.date == date(2023, 5, 1)
    assert older.categories == ('angular', 'typescript')
    assert older.source == 'Medium'
    assert older.url.startswith('https://medium.com/@tester/older-medium-story')


def test_medium_without_username_returns_nothing(app_ctx, content, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("no request expected")
    monkeypatch.setattr(theme_articles.requests, 'get', fail)
    assert MediumSource().fetch(content) == []


def test_medium_fetch_and_cache(app_ctx, content, monkeypatch):
    app_ctx.config['MEDIUM_USERNAME'] = 'tester'
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(MEDIUM_FEED)

    monkeypatch.setattr(theme_articles.requests, 'get', fake_get)
    first = MediumSource().fetch(content)
    second = MediumSource().fetch(content)

    assert len(first) == 2
    assert first == second
    assert calls == [('https://medium.com/feed/@tester', 10)]


def test_medium_network_error_returns_nothing_and_backs_off(app_ctx, content, monkeypatch):
    app_ctx.config['MEDIUM_USERNAME'] = 'tester'
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(theme_articles.requests, 'get', fake_get)
    assert MediumSource().fetch(content) == []
    assert MediumSource().fetch(content) == []
    assert len(calls) == 1

    expires_at, cached = theme_articles.MEDIUM_FEED_CACHE['tester']
    assert cached == []
    monkeypatch.setattr(theme_articles.time, 'time', lambda: expires_at + 1)
    assert MediumSource().fetch(content) == []
    assert len(calls) == 2


def test_medium_http_error_and_bad_xml(app_ctx, content, monkeypatch):
    app_ctx.config['MEDIUM_USERNAME'] = 'tester'
    monkeypatch.setattr(theme_articles.requests, 'get', lambda url, timeout: FakeResponse(status_code=503))
    assert MediumSource().fetch(content) == []

    theme_articles.MEDIUM_FEED_CACHE.clear()
    monkeypatch.setattr(theme_articles.requests, 'get', lambda url, timeout: FakeResponse(b'<rss><broken'))
    assert MediumSource().fetch(content) == []
    assert theme_articles.MEDIUM_FEED_CACHE['tester'][1] == []


def test_latest_articles_merges_sources(app_ctx, content, monkeypatch):
    app_ctx.config['MEDIUM_USERNAME'] = 'tester'
    monkeypatch.setattr(theme_articles.requests, 'get', lambda url, timeout: FakeResponse(MEDIUM_FEED))

    merged = latest_articles(['Blog', 'Medium'], content)
    assert [a.title for a in merged] == [
        'Newest Medium Story',
        'Second Post',
        'Older Medium Story',
        'First Post',
    ]
    assert [a.title for a in latest_articles(['Blog', 'Medium'], content, limit=2)] == [
        'Newest Medium Story',
        'Second Post',
    ]


def test_latest_articles_unknown_source(app_ctx, content):
    with pytest.raises(UnknownArticleSourceError):
        latest_articles(['Dev.to'], content)
