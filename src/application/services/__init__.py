"""Application services."""

from src.application.services.hierarchy_resolver import HierarchyResolver

__all__ = ["HierarchyResolver"]
