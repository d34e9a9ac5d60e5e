"""
API package containing the routes of the service.

``router.py`` exposes a top-level ``router`` which includes the
routers defined in ``endpoints``.
"""
