"""Core configuration."""

from achroma.core.config import ConeResponseConfig

__all__ = ["ConeResponseConfig"]
