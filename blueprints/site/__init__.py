"""
Site Blueprint - Public pages
Handles: Home page, blog, legal pages, sitemap, robots.txt
"""

from flask import Blueprint

site_bp = Blueprint('site', __name__, url_prefix='')

from . import routes
