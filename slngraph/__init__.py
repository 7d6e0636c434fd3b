"""slngraph - project dependency graph analysis for multi-project solutions."""

__version__ = "0.1.0"
