"""Ny'Gothor -- a text adventure in a procedurally generated cave."""

__version__ = "0.1.0"
