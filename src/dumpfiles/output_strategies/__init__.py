"""Formatting strategies for the nested content section."""

from .base_strategy import OutputStrategy
from .tag_strategy import TagOutputStrategy

__all__ = ["OutputStrategy", "TagOutputStrategy"]
