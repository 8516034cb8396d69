"""
Index Page - The portfolio home page

Both variants share one section list; they differ only in their SEO text.
"""

from theme import (
    AboutSection,
    ArticlesSection,
    ContactSection,
    HeroSection,
    InterestsSection,
    Page,
    PageDefinition,
    ProjectsSection,
    Seo,
)

SEO_VARIANTS = {
    'default': Seo(
        title="Vincent Casteldaccia - Full Stack TypeScript Developer | Angular & React Specialist",
        description=(
            "Full Stack TypeScript Developer specializing in Angular and React/Next.js. "
            "Based in Australia, available for remote opportunities worldwide. "
            "Expert in building scalable web applications."
        ),
    ),
    'remote': Seo(
        title="Full Stack TypeScript Developer - Remote Developer Australia",
        description=(
            "Remote Full Stack TypeScript Developer based in Australia. "
            "Angular, React and Next.js applications for teams worldwide."
        ),
    ),
}

INDEX_SECTIONS = (
    HeroSection(section_id="hero"),
    AboutSection(section_id="about", heading="About Me"),
    ProjectsSection(section_id="projects", heading="Projects"),
    InterestsSection(section_id="skills", heading="Skills & Technologies"),
    ArticlesSection(section_id="articles", heading="Latest Articles", sources=("Blog",)),
    ContactSection(section_id="contact", heading="Let's Work Together"),
)


def index_page():
    return PageDefinition(
        seo=SEO_VARIANTS['default'],
        page=Page(sections=INDEX_SECTIONS, use_splash_screen_animation=True),
    )


def remote_index_page():
    return PageDefinition(
        seo=SEO_VARIANTS['remote'],
        page=Page(sections=INDEX_SECTIONS, use_splash_screen_animation=True),
    )
