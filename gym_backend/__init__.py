"""Gym brand platform backend: admin CRUD, public content and form intake."""

__version__ = "0.1.0"
