"""Grammar reading, rewriting, analysis and writing tools, with a cQASM data model and checker."""

__version__ = "0.1.0"