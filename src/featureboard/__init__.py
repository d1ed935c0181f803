"""featureboard: terminal kanban board for features grouped by status."""

__version__ = "0.1.0"
