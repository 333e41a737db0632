# ABOUTME: Bookshelf - a personal book catalog with Open Library suggestions.
# ABOUTME: Package root; see bookshelf.api for the service and bookshelf.cli for the CLI.

__version__ = "0.1.0"
