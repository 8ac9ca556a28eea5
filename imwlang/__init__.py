"""Scanner, parser, symbol table and command-line checkers for the Imw teaching language."""

__version__ = "0.1.0"