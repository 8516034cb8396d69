"""
Content Repository - Reads the portfolio content directory

Layout:
    settings.json
    sections/hero/hero.json
    sections/about/about.md
    sections/projects/projects.json
    sections/interests/interests.json
    sections/contact/contact.json
    articles/*.md
    legal/imprint.md, legal/privacy.md
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from flask import current_app, g

from .errors import ContentError


def split_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split YAML frontmatter delimited by leading '---' lines from the body.
    Returns (frontmatter_dict, body). Text without frontmatter yields ({}, text).
    """
    lines = text.splitlines()
    if not lines or lines[0].rstrip() != "---":
        return {}, text

    try:
        end_idx = next(i for i in range(1, len(lines)) if lines[i].strip() == "---")
    except StopIteration:
        return {}, text

    fm_text = "\n".join(lines[1:end_idx]).strip()
    body = "\n".join(lines[end_idx + 1:]).lstrip("\n")
    if not fm_text:
        return {}, body

    loaded = yaml.safe_load(fm_text)
    if not isinstance(loaded, dict):
        raise ValueError("frontmatter must be a mapping")
    return loaded, body


class ContentRepository:
    """Read-only access to the JSON and markdown files under one content root."""

    def __init__(self, root):
        self.root = Path(root)
        self._settings = None

    @classmethod
    def current(cls) -> "ContentRepository":
        """Repository for CONTENT_DIR, shared for the duration of the request."""
        repo = g.get('content_repository')
        if repo is None:
            repo = cls(current_app.config['CONTENT_DIR'])
            g.content_repository = repo
        return repo

    def path(self, *parts: str) -> Path:
        return self.root.joinpath(*parts)

    def exists(self, *parts: str) -> bool:
        return self.path(*parts).is_file()

    def read_json(self, *parts: str) -> Dict[str, Any]:
        path = self.path(*parts)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ContentError(path, "file not found") from e
        except json.JSONDecodeError as e:
            raise ContentError(path, f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ContentError(path, "expected a JSON object")
        return data

    def read_markdown(self, *parts: str) -> Tuple[Dict[str, Any], str]:
        path = self.path(*parts)
        try:
            text = path.read_text(encoding='utf-8')
        except FileNotFoundError as e:
            raise ContentError(path, "file not found") from e
        try:
            return split_frontmatter(text)
        except (yaml.YAMLError, ValueError) as e:
            raise ContentError(path, f"invalid frontmatter: {e}") from e

    def list_markdown(self, *parts: str) -> List[Path]:
        directory = self.path(*parts)
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.glob('*.md') if p.is_file())

    # ----- typed accessors -----

    def settings(self) -> Dict[str, Any]:
        if self._settings is None:
            data = self.read_json('settings.json')
            data.setdefault('siteMetadata', {})
            data.setdefault('navigation', {})
            data.setdefault('socialProfiles', [])
            self._settings = data
        return self._settings

    def section(self, kind: str) -> Dict[str, Any]:
        return self.read_json('sections', kind, f'{kind}.json')

    def about(self) -> Dict[str, Any]:
        frontmatter, body = self.read_markdown('sections', 'about', 'about.md')
        return {'frontmatter': frontmatter, 'body': body}

    def legal(self, name: str) -> Optional[Dict[str, Any]]:
        if not self.exists('legal', f'{name}.md'):
            return None
        frontmatter, body = self.read_markdown('legal', f'{name}.md')
        return {'frontmatter': frontmatter, 'body': body}
