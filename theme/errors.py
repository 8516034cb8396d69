"""Exceptions raised by the theme package."""


class ThemeError(Exception):
    """Base class for theme errors."""


class ContentError(ThemeError):
    """A content file is missing or cannot be parsed."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class DuplicateSectionError(ThemeError):
    """Two sections on one page share a section id."""

    def __init__(self, section_id):
        self.section_id = section_id
        super().__init__(f"Duplicate section id: {section_id!r}")


class UnknownArticleSourceError(ThemeError):
    """An articles section names a source the theme does not provide."""

    def __init__(self, source, known):
        self.source = source
        self.known = tuple(known)
        super().__init__(f"Unknown article source {source!r} (known: {', '.join(self.known)})")
