"""JSON view adapters for the dashboard pages."""

__all__ = []
