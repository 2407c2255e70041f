"""Project listing service with an admin-gated, order-preserving CRUD API."""

__version__ = "1.0.0"
