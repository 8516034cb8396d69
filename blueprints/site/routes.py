"""
Site Routes - Public pages
Handles: Home page, blog, legal pages, sitemap, robots.txt
"""

from datetime import datetime
from flask import abort, current_app, request, url_for
from markupsafe import escape
from pages import get_page
from theme import ContentRepository, Seo, render_page, render_themed
from theme.articles import BlogSource
from theme.markdown import render_markdown_safe
from . import site_bp

LEGAL_PAGES = {
    'imprint': 'Imprint',
    'privacy': 'Privacy Policy',
}


@site_bp.route('/')
def index():
    """Home page - the configured page definition"""
    page_name = current_app.config.get('INDEX_PAGE', 'index')
    try:
        assemble = get_page(page_name)
    except KeyError:
        current_app.logger.error(f"Unknown INDEX_PAGE {page_name!r}, serving 'index'")
        assemble = get_page('index')
    return render_page(assemble())


@site_bp.route('/blog')
def blog():
    """All blog articles, optionally filtered by category"""
    content = ContentRepository.current()
    articles = BlogSource().fetch(content)
    categories = sorted({c for a in articles for c in a.categories})

    active_category = request.args.get('category')
    if active_category:
        articles = [a for a in articles if active_category in a.categories]

    site = content.settings()['siteMetadata']
    seo = Seo(title='Blog', description=f"Articles by {site.get('author') or site.get('title', '')}".strip(),
              use_title_template=True)
    return render_themed('theme/blog.html', seo, content=content,
                         heading='Blog',
                         articles=articles,
                         categories=categories,
                         active_category=active_category)


@site_bp.route('/blog/<slug>')
def article(slug):
    """Single blog article"""
    content = ContentRepository.current()
    found = BlogSource().get(content, slug)
    if found is None:
        abort(404)

    seo = Seo(title=found.title, description=found.description or None, use_title_template=True)
    return render_themed('theme/article.html', seo, content=content,
                         article=found,
                         body=render_markdown_safe(found.body))


@site_bp.route('/imprint', defaults={'name': 'imprint'}, endpoint='imprint')
@site_bp.route('/privacy', defaults={'name': 'privacy'}, endpoint='privacy')
def legal(name):
    """Legal pages rendered from content/legal/<name>.md"""
    content = ContentRepository.current()
    page = content.legal(name)
    if page is None:
        abort(404)

    heading = page['frontmatter'].get('title') or LEGAL_PAGES[name]
    seo = Seo(title=heading, use_title_template=True)
    return render_themed('theme/legal.html', seo, content=content,
                         heading=heading,
                         body=render_markdown_safe(page['body']))


@site_bp.route('/sitemap.xml')
def sitemap():
    """Generate dynamic sitemap for SEO"""
    content = ContentRepository.current()
    base_url = (current_app.config.get('SITE_URL') or request.url_root).rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [{
        'loc': f'{base_url}/',
        'changefreq': 'weekly',
        'priority': '1.0',
        'lastmod': today
    }]

    articles = BlogSource().fetch(content)
    if articles:
        sitemap_entries.append({
            'loc': f"{base_url}{url_for('site.blog')}",
            'changefreq': 'weekly',
            'priority': '0.8',
            'lastmod': articles[0].date.isoformat()
        })
    for entry in articles:
        sitemap_entries.append({
            'loc': f'{base_url}{entry.url}',
            'changefreq': 'monthly',
            'priority': '0.7',
            'lastmod': entry.date.isoformat()
        })

    for name in LEGAL_PAGES:
        if content.exists('legal', f'{name}.md'):
            sitemap_entries.append({
                'loc': f"{base_url}{url_for(f'site.{name}')}",
                'changefreq': 'yearly',
                'priority': '0.3',
                'lastmod': today
            })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{escape(entry["loc"])}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@site_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    base_url = (current_app.config.get('SITE_URL') or request.url_root).rstrip('/')
    robots_txt = f"""User-agent: *
Allow: /
Disallow: /contact

Sitemap: {base_url}/sitemap.xml"""

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
