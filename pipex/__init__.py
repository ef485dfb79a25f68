"""Join two commands with a pipe between an input file and an output file."""

__version__ = "0.1.0"