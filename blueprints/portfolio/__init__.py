"""
Portfolio Blueprint - Visitor interactions with the portfolio
Handles: Contact form submissions
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
