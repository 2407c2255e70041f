"""
Persistence adapters.

Services depend on ``SQLRepository`` rather than opening SQLAlchemy
sessions themselves.
"""
