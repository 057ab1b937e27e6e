"""Simulated portfolio returns under geometric Brownian motion."""

__version__ = "0.1.0"
