"""Business logic services."""

from contact_analyzer.services.contacts import ContactService
from contact_analyzer.services.validation import ContactValidator

__all__ = ["ContactService", "ContactValidator"]
