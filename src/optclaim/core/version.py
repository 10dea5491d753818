"""Version information for optclaim."""

__version__ = "1.2.0"
