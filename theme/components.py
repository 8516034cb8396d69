"""
Theme Components - Seo, Page and the prebuilt portfolio sections

Pages are composed from these immutable records and handed to render_page(),
which loads the content each section needs and renders the Jinja templates.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from flask import current_app, render_template, request, url_for
from markupsafe import Markup

from .articles import latest_articles, validate_sources
from .content import ContentRepository
from .errors import DuplicateSectionError
from .markdown import render_markdown_safe


class SectionKind(Enum):
    HERO = 'hero'
    ABOUT = 'about'
    PROJECTS = 'projects'
    INTERESTS = 'interests'
    ARTICLES = 'articles'
    CONTACT = 'contact'


@dataclass(frozen=True)
class Seo:
    """Page metadata for the document head and link previews."""

    title: str
    description: Optional[str] = None
    use_title_template: bool = False

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Seo title must be a non-empty string")

    def meta(self, site: Dict[str, Any], url: str = '') -> Dict[str, str]:
        """Resolve head tags against the site metadata."""
        site_title = site.get('title', '')
        title = self.title
        if self.use_title_template and site_title:
            title = f'{self.title} | {site_title}'
        description = self.description or site.get('description', '')
        site_url = (site.get('siteUrl') or '').rstrip('/')
        image = site.get('thumbnail') or ''
        if image and site_url and image.startswith('/'):
            image = f'{site_url}{image}'

        return {
            'title': title,
            'description': description,
            'lang': site.get('language', 'en'),
            'author': site.get('author', ''),
            'canonical': url,
            'image': image,
            'og:type': 'website',
            'og:title': title,
            'og:description': description,
            'og:url': url,
            'og:site_name': site_title,
            'twitter:card': 'summary_large_image' if image else 'summary',
            'twitter:title': title,
            'twitter:description': description,
        }


def _social_profiles(settings: Dict[str, Any], config: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Social profiles from settings, filtered and ordered by config['from']."""
    profiles = settings.get('socialProfiles', [])
    if not config:
        return []
    wanted = config.get('from') or []
    by_label = {p.get('label'): p for p in profiles}
    selected = [by_label[label] for label in wanted if label in by_label]
    show_icons = bool(config.get('showIcons', False))
    return [dict(p, show_icon=show_icons) for p in selected]


@dataclass(frozen=True)
class Section:
    """A prebuilt content block anchored at section_id."""

    section_id: str
    heading: Optional[str] = None

    kind: ClassVar[SectionKind]

    def __post_init__(self):
        if not isinstance(self.section_id, str) or not self.section_id.strip():
            raise ValueError(f"{type(self).__name__} needs a non-empty section_id")

    @property
    def template(self) -> str:
        return f'theme/sections/{self.kind.value}.html'

    def context(self, content: ContentRepository, settings: Dict[str, Any]) -> Dict[str, Any]:
        return content.section(self.kind.value)

    def render(self, content: ContentRepository, settings: Optional[Dict[str, Any]] = None) -> Markup:
        if settings is None:
            settings = content.settings()
        return Markup(render_template(self.template, section=self, **self.context(content, settings)))


@dataclass(frozen=True)
class HeroSection(Section):
    kind: ClassVar[SectionKind] = SectionKind.HERO

    def context(self, content, settings):
        data = content.section('hero')
        return {
            'hero': data,
            'social_profiles': _social_profiles(settings, data.get('socialProfiles')),
        }


@dataclass(frozen=True)
class AboutSection(Section):
    kind: ClassVar[SectionKind] = SectionKind.ABOUT

    def context(self, content, settings):
        about = content.about()
        frontmatter = about['frontmatter']
        image = None
        if frontmatter.get('imageSrc'):
            image = {'src': frontmatter['imageSrc'], 'alt': frontmatter.get('imageAlt', '')}
        return {'body': render_markdown_safe(about['body']), 'image': image}


@dataclass(frozen=True)
class ProjectsSection(Section):
    kind: ClassVar[SectionKind] = SectionKind.PROJECTS

    def context(self, content, settings):
        data = content.section('projects')
        projects = [p for p in data.get('projects', []) if p.get('visible', True)]
        button = data.get('button') or {}
        return {
            'projects': projects,
            'button': button if button.get('visible') else None,
        }


@dataclass(frozen=True)
class InterestsSection(Section):
    kind: ClassVar[SectionKind] = SectionKind.INTERESTS

    def context(self, content, settings):
        data = content.section('interests')
        interests = data.get('interests', [])
        button = data.get('button') or {}
        shown = len(interests)
        if button.get('visible'):
            shown = int(button.get('initiallyShownInterests', shown))
        return {
            'interests': interests,
            'initially_shown': shown,
            'button': button if button.get('visible') and shown < len(interests) else None,
        }


@dataclass(frozen=True)
class ArticlesSection(Section):
    sources: Tuple[str, ...] = ('Blog',)
    limit: Optional[int] = None

    kind: ClassVar[SectionKind] = SectionKind.ARTICLES

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, 'sources', validate_sources(self.sources))

    def context(self, content, settings):
        limit = self.limit if self.limit is not None else current_app.config.get('ARTICLES_LIMIT', 3)
        articles = latest_articles(self.sources, content, limit=limit)
        return {
            'articles': articles,
            'show_blog_link': 'Blog' in self.sources,
        }


@dataclass(frozen=True)
class ContactSection(Section):
    kind: ClassVar[SectionKind] = SectionKind.CONTACT

    def context(self, content, settings):
        data = content.section('contact')
        form_enabled = current_app.config.get('CONTACT_FORM_ENABLED', False)
        return {
            'contact': data,
            'social_profiles': _social_profiles(settings, data.get('socialProfiles')),
            'form_action': url_for('portfolio.contact') if form_enabled else None,
        }


@dataclass(frozen=True)
class Page:
    """Ordered container of sections with page-level display options."""

    sections: Tuple[Section, ...] = ()
    use_splash_screen_animation: bool = False

    def __post_init__(self):
        sections = tuple(self.sections)
        seen = set()
        for section in sections:
            if section.section_id in seen:
                raise DuplicateSectionError(section.section_id)
            seen.add(section.section_id)
        object.__setattr__(self, 'sections', sections)

    @property
    def section_ids(self) -> Tuple[str, ...]:
        return tuple(s.section_id for s in self.sections)

    def navigation(self, settings: Dict[str, Any]) -> List[Dict[str, str]]:
        """Header links: the configured ones, else one per headed section."""
        configured = settings.get('navigation', {}).get('header')
        if configured:
            return [{'label': item['label'], 'url': item['url']} for item in configured]
        return [
            {'label': s.heading, 'url': f'#{s.section_id}'}
            for s in self.sections if s.heading
        ]


@dataclass(frozen=True)
class PageDefinition:
    """A page as handed to the rendering pipeline: metadata plus sections."""

    seo: Seo
    page: Page = field(default_factory=Page)

    @property
    def sections(self) -> Tuple[Section, ...]:
        return self.page.sections


def render_themed(template: str, seo: Seo, content: Optional[ContentRepository] = None,
                  page: Optional[Page] = None, **context) -> str:
    """Render a template inside the theme layout with resolved SEO tags."""
    if content is None:
        content = ContentRepository.current()
    settings = content.settings()
    site = settings['siteMetadata']
    site_url = (current_app.config.get('SITE_URL') or site.get('siteUrl') or '').rstrip('/')
    url = f'{site_url}{request.path}' if site_url else request.base_url

    navigation = page.navigation(settings) if page else [
        {'label': item['label'], 'url': item['url']}
        for item in settings['navigation'].get('header', [])
    ]
    return render_template(
        template,
        seo=seo.meta(site, url),
        site=site,
        settings=settings,
        navigation=navigation,
        footer_links=settings['navigation'].get('footer', []),
        splash=bool(page and page.use_splash_screen_animation),
        **context,
    )


def render_page(definition: PageDefinition, content: Optional[ContentRepository] = None) -> str:
    """Render a page definition: every section in declaration order."""
    if content is None:
        content = ContentRepository.current()
    settings = content.settings()
    rendered = [(section, section.render(content, settings)) for section in definition.sections]
    return render_themed('theme/page.html', definition.seo, content=content,
                         page=definition.page, sections=rendered)
