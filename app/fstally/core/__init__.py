"""Core infrastructure for fstally.

Configuration, XDG paths, error types, and logging setup.
"""
