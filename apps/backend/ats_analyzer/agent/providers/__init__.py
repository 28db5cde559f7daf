from .base import Provider
from .static import StaticProvider

__all__ = ["Provider", "StaticProvider"]
