"""
Contact Blueprint - Public contact form API
Handles: Contact submission validation and persistence
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api')

from . import routes
