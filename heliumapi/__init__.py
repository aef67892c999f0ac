"""Async client and typed models for the Helium blockchain HTTP API."""

__version__ = "0.1.0"