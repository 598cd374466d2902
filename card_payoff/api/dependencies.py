"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from card_payoff.config import Settings, settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide engine settings; tests override this to shrink the horizon"""
    return settings
