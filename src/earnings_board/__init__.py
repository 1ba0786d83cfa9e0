"""Earnings Board: upcoming earnings releases as dashboard cards."""

__version__ = "0.1.0"
