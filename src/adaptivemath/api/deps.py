"""
Shared API Dependencies
"""

from fastapi import Request

from adaptivemath.diagnostic import SessionRegistry


def get_registry(request: Request) -> SessionRegistry:
    """Session registry owned by the running application."""
    registry: SessionRegistry = request.app.state.session_registry
    return registry
