"""
Application package initializer.

The domain core lives in ``models``, ``mappers``, ``services`` and
``repositories``; ``api`` exposes it over HTTP and ``core`` holds
settings, logging, database setup and the domain errors.
"""

from .main import app  # noqa: F401
