"""
WSGI compatibility layer.

Exposes the trade unwind API to WSGI servers (gunicorn, waitress)
by wrapping the ASGI application. Prefer an ASGI server such as uvicorn.
"""

from a2wsgi import ASGIMiddleware

from app.main import app

application = ASGIMiddleware(app)
