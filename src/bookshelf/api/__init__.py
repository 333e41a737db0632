# ABOUTME: HTTP service package for the Bookshelf catalog.
# ABOUTME: Exports the application factory.

from bookshelf.api.app import create_app

__all__ = ["create_app"]
