"""Two-stack integer sorting with a small instruction set: stacks, argument parsing, sorting strategies and a command line."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stack"]