"""WhoAmI: report the connection metadata a server sees for each caller."""

__version__ = "0.1.0"
