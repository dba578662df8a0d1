"""
Routes package for the landing page fixture site.

This package contains route blueprints:
- api: health endpoint used to detect when the site is ready
- views: HTML pages for the landing page and its navigation targets
"""
