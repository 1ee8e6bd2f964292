"""Upstream API clients."""

from .aoe4world import Aoe4WorldClient

__all__ = ["Aoe4WorldClient"]
