"""
JSON endpoints for the fixture site.

Endpoints:
    GET    /api/health        - Health check
"""

from flask import Blueprint, jsonify, Response

api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint polled before the browser suite starts."""
    return jsonify({
        "status": "healthy",
        "service": "landing",
    }), 200
