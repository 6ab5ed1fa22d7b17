"""API blueprints and endpoints."""

from flask import Blueprint

from contact_analyzer.api.contacts import contacts_bp, get_contact_service


# Create main API blueprint
api_bp = Blueprint("api", __name__)

api_bp.register_blueprint(contacts_bp, url_prefix="/contacts")

__all__ = ["api_bp", "get_contact_service"]
