"""Parse title formatting scripts and evaluate them against tag metadata."""

__version__ = "0.2.0"
__all__ = ["types", "numeric", "control", "strings", "environment", "parser", "program"]