"""
Natural language to shell command assistant backed by a local Ollama model.

This package provides an interactive command-line assistant that turns plain
language requests into shell commands, explains them, and runs them only after
the user confirms.
"""

__version__ = "0.1.0"
