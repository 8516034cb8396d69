"""
Portfolio Theme - Prebuilt sections, SEO metadata and page rendering
Pages compose Seo, Page and the section components; the theme owns
templates, static assets and content loading.
"""

from flask import Blueprint

theme_bp = Blueprint(
    'theme',
    __name__,
    template_folder='templates',
    static_folder='static',
    static_url_path='/theme/static',
)

from .components import (
    Seo,
    Page,
    PageDefinition,
    SectionKind,
    Section,
    HeroSection,
    AboutSection,
    ProjectsSection,
    InterestsSection,
    ArticlesSection,
    ContactSection,
    render_page,
    render_themed,
)
from .content import ContentRepository
from .errors import ThemeError, ContentError, DuplicateSectionError, UnknownArticleSourceError

__all__ = [
    'theme_bp',
    'Seo',
    'Page',
    'PageDefinition',
    'SectionKind',
    'Section',
    'HeroSection',
    'AboutSection',
    'ProjectsSection',
    'InterestsSection',
    'ArticlesSection',
    'ContactSection',
    'render_page',
    'render_themed',
    'ContentRepository',
    'ThemeError',
    'ContentError',
    'DuplicateSectionError',
    'UnknownArticleSourceError',
]
