"""
HTTP server for SnippetMind
"""

from .api import create_app

__all__ = ['create_app']
