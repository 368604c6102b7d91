"""git-rflow: guarded branch workflows on top of git."""

PROG_NAME = "git-rflow"
__version__ = "0.1.0"
