"""Concrete adapters for the interfaces in ``feedback_service.interfaces``."""
