"""
CLI commands for hclustkit.

Provides the command-line interface for building and cutting dendrograms.
"""

__all__ = ["cluster", "main"]
