"""Markup emitters."""

from .emitter import NamespaceEmitter

__all__ = ["NamespaceEmitter"]
