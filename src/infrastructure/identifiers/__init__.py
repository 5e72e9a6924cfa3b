"""Identifier generator adapters."""

from src.infrastructure.identifiers.uuid7_generator import Uuid7IdGenerator

__all__ = ["Uuid7IdGenerator"]
