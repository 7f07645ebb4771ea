"""fstally - Filesystem size and extension reporting toolkit."""

__version__ = "0.1.0"
