"""Classic textbook algorithms (GCD, array routines, string matching, factorials, sorts, graph closures) with simple timing and a command-line front end."""

__version__ = "0.1.0"