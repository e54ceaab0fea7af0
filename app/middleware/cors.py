"""
CORS Middleware - only browser pages served from this machine may call the API
"""
from urllib.parse import urlparse

from flask import request

from settings import load_settings

ALLOW_METHODS = "GET,HEAD,OPTIONS,POST,PUT,DELETE"
ALLOW_HEADERS = (
    "Access-Control-Allow-Headers, Origin, Accept, X-Requested-With, Content-Type, "
    "Access-Control-Request-Method, Access-Control-Request-Headers"
)


def origin_allowed(origin, allowed_hosts):
    if not origin:
        return False
    return urlparse(origin).hostname in allowed_hosts


def init_cors(app):
    """Answer preflights and add CORS headers for allowed origins"""
    allowed_hosts = app.config.get("CORS_ALLOWED_HOSTS")
    if allowed_hosts is None:
        allowed_hosts = load_settings()["cors"]["allowed_hosts"]
    allowed_hosts = set(allowed_hosts)

    @app.before_request
    def answer_preflight():
        if request.method == "OPTIONS":
            return "", 200

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        if origin_allowed(origin, allowed_hosts):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
            response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response
