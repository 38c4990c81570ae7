"""Solutions to Kick Start, Hash Code and Codeforces problems, as functions and judge-style runners."""

__version__ = "0.1.0"