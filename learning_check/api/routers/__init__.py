"""API routers."""

from .conversation_sessions import router as conversation_sessions_router
from .health import router as health_router
from .learning_checks import router as learning_checks_router

__all__ = [
    "conversation_sessions_router",
    "health_router",
    "learning_checks_router",
]
