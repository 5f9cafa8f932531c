"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.

The contact store is not created here: it is built per application by
create_app() (or injected by the caller) and kept in app.extensions.
"""

from flask import current_app
from flask_cors import CORS

# Initialize extensions without binding to app
cors = CORS()

STORE_KEY = 'contact_store'


def get_store():
    """Return the SubmissionStore bound to the current application"""
    return current_app.extensions[STORE_KEY]


__all__ = ['cors', 'get_store', 'STORE_KEY']
