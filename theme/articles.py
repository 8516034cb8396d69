"""
Article Sources - Blog (local markdown) and Medium (RSS feed)

Every source returns a list of Article records; latest_articles() merges
the requested sources newest first.
"""

import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import requests
from flask import current_app

from .content import ContentRepository
from .errors import UnknownArticleSourceError
from .markdown import reading_time


@dataclass(frozen=True)
class Article:
    slug: str
    title: str
    date: date
    source: str
    url: str
    description: str = ''
    categories: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    banner: Optional[Dict[str, str]] = field(default=None, compare=False)
    body: str = field(default='', repr=False)
    reading_time: int = 1


def _as_tuple(value) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(v.strip() for v in value.split(',') if v.strip())
    return tuple(str(v).strip() for v in value if str(v).strip())


def _as_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip()[:10], '%Y-%m-%d').date()
        except ValueError:
            return None
    return None


class BlogSource:
    """Markdown articles stored under content/articles/."""

    name = 'Blog'

    def fetch(self, content: ContentRepository) -> List[Article]:
        articles = []
        for path in content.list_markdown('articles'):
            frontmatter, body = content.read_markdown('articles', path.name)
            if frontmatter.get('draft'):
                continue
            published = _as_date(frontmatter.get('date'))
            if not frontmatter.get('title') or published is None:
                current_app.logger.warning(f"Skipping article {path.name}: title and date are required")
                continue
            slug = str(frontmatter.get('slug') or path.stem)
            articles.append(Article(
                slug=slug,
                title=str(frontmatter['title']),
                date=published,
                source=self.name,
                url=f"/blog/{quote(slug, safe='')}",
                description=str(frontmatter.get('description') or ''),
                categories=_as_tuple(frontmatter.get('categories')),
                keywords=_as_tuple(frontmatter.get('keywords')),
                banner=frontmatter.get('banner'),
                body=body,
                reading_time=reading_time(body),
            ))
        return sorted(articles, key=lambda a: a.date, reverse=True)

    def get(self, content: ContentRepository, slug: str) -> Optional[Article]:
        return next((a for a in self.fetch(content) if a.slug == slug), None)


# Medium feed cache: {username: (expires_at, [Article, ...])}
MEDIUM_FEED_CACHE = {}
MEDIUM_FEED_URL = 'https://medium.com/feed/@{username}'


class MediumSource:
    """Articles published on Medium, read from the user's RSS feed."""

    name = 'Medium'

    def fetch(self, content: ContentRepository) -> List[Article]:
        username = current_app.config.get('MEDIUM_USERNAME')
        if not username:
            current_app.logger.debug("MEDIUM_USERNAME not configured, no Medium articles")
            return []

        cached = MEDIUM_FEED_CACHE.get(username)
        if cached and time.time() < cached[0]:
            return list(cached[1])

        try:
            response = requests.get(MEDIUM_FEED_URL.format(username=username), timeout=10)
            response.raise_for_status()
            articles = self.parse_feed(response.content)
        except requests.RequestException as e:
            current_app.logger.error(f"Medium feed request failed for {username}: {str(e)}")
            return self._back_off(username)
        except ET.ParseError as e:
            current_app.logger.error(f"Medium feed for {username} is not valid XML: {str(e)}")
            return self._back_off(username)

        ttl = current_app.config.get('MEDIUM_CACHE_SECONDS', 3600)
        MEDIUM_FEED_CACHE[username] = (time.time() + ttl, articles)
        current_app.logger.info(f"Loaded {len(articles)} Medium articles for {username}")
        return list(articles)

    def _back_off(self, username) -> List[Article]:
        """Remember the failure so the feed is not requested again until the retry delay passes."""
        retry = current_app.config.get('MEDIUM_RETRY_SECONDS', 300)
        MEDIUM_FEED_CACHE[username] = (time.time() + retry, [])
        return []

    def parse_feed(self, xml_bytes) -> List[Article]:
        root = ET.fromstring(xml_bytes)
        articles = []
        for item in root.iter('item'):
            title = (item.findtext('title') or '').strip()
            link = (item.findtext('link') or '').strip()
            pub_date = item.findtext('pubDate')
            if not (title and link and pub_date):
                continue
            try:
                published = parsedate_to_datetime(pub_date).date()
            except (TypeError, ValueError):
                continue
            slug = link.split('?', 1)[0].rstrip('/').rsplit('/', 1)[-1]
            articles.append(Article(
                slug=slug,
                title=title,
                date=published,
                source=self.name,
                url=link,
                categories=tuple(c.text.strip() for c in item.findall('category') if c.text),
            ))
        return sorted(articles, key=lambda a: a.date, reverse=True)


ARTICLE_SOURCES = {
    BlogSource.name: BlogSource(),
    MediumSource.name: MediumSource(),
}


def validate_sources(sources: Iterable[str]) -> Tuple[str, ...]:
    sources = tuple(sources)
    for source in sources:
        if source not in ARTICLE_SOURCES:
            raise UnknownArticleSourceError(source, ARTICLE_SOURCES)
    return sources


def latest_articles(sources: Iterable[str], content: ContentRepository, limit: Optional[int] = None) -> List[Article]:
    """Merge the articles of the given sources, newest first, cut to limit."""
    articles = []
    for source in validate_sources(sources):
        articles.extend(ARTICLE_SOURCES[source].fetch(content))
    articles.sort(key=lambda a: a.date, reverse=True)
    return articles if limit is None else articles[:limit]
