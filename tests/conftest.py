"""
Shared fixtures: a testing app (in-memory SQLite), its client, and a
minimal content directory built under tmp_path.
"""

import json
import textwrap
from pathlib import Path

import pytest

from app import create_app
from theme import articles as theme_articles
from utils import security


@pytest.fixture
def app():
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Rate-limit table and Medium cache are process-wide."""
    security.RATE_LIMIT_REQUESTS.clear()
    theme_articles.MEDIUM_FEED_CACHE.clear()
    yield
    security.RATE_LIMIT_REQUESTS.clear()
    theme_articles.MEDIUM_FEED_CACHE.clear()


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding='utf-8')


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text).lstrip('\n'), encoding='utf-8')


def build_content(root: Path) -> Path:
    """Smallest content tree every section can render from."""
    write_json(root / 'settings.json', {
        'siteMetadata': {
            'title': 'Test Site',
            'description': 'Site description',
            'author': 'Test Author',
            'siteUrl': 'https://portfolio.test',
            'language': 'en',
        },
        'socialProfiles': [
            {'label': 'Github', 'url': 'https://github.com/test'},
            {'label': 'LinkedIn', 'url': 'https://linkedin.com/in/test'},
        ],
    })
    write_json(root / 'sections' / 'hero' / 'hero.json', {
        'intro': 'Hi, I am',
        'title': 'Test Author',
        'subtitle': {'prefix': 'I write ', 'highlight': 'tests', 'suffix': '.'},
        'socialProfiles': {'from': ['LinkedIn', 'Github'], 'showIcons': False},
    })
    write_text(root / 'sections' / 'about' / 'about.md', """
        ---
        imageSrc: /img/me.png
        imageAlt: Me
        ---
        Hello **world**.
    """)
    write_json(root / 'sections' / 'projects' / 'projects.json', {
        'projects': [
            {'title': 'Shown Project', 'tags': ['Flask']},
            {'title': 'Hidden Project', 'visible': False},
        ],
    })
    write_json(root / 'sections' / 'interests' / 'interests.json', {
        'interests': [{'label': 'Python'}, {'label': 'Flask'}, {'label': 'SQL'}],
        'button': {'visible': True, 'label': 'Show all', 'initiallyShownInterests': 2},
    })
    write_json(root / 'sections' / 'contact' / 'contact.json', {
        'author': 'Test Author',
        'email': 'author@portfolio.test',
        'socialProfiles': {'from': ['Github']},
    })
    write_text(root / 'articles' / 'first-post.md', """
        ---
        title: First Post
        description: The first one.
        date: 2023-01-10
        categories: [Python]
        ---
        Body of the first post.
    """)
    write_text(root / 'articles' / 'second-post.md', """
        ---
        title: Second Post
        date: 2023-06-01
        categories: [Flask, Python]
        ---
        Body of the second post.
    """)
    write_text(root / 'articles' / 'draft-post.md', """
        ---
        title: Draft Post
        date: 2024-01-01
        draft: true
        ---
        Not published.
    """)
    write_text(root / 'legal' / 'privacy.md', """
        ---
        title: Privacy Policy
        ---
        We keep contact messages only.
    """)
    return root


@pytest.fixture
def content_dir(tmp_path, app):
    root = build_content(tmp_path / 'content')
    app.config['CONTENT_DIR'] = str(root)
    return root
