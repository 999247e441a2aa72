"""Version information for neo-hashstore."""

__version__ = "0.1.0"
