"""Minimal HTTP service with a greeting, health check, hostname and a Basic-auth protected secret."""

__version__ = "1.0.0"
