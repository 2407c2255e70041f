"""
Core utilities shared across the projectboard API.

This package hosts:
- configuration helpers (env vars, paths)
- cross-cutting concerns such as password hashing, cookie signing,
  the error taxonomy and logging setup.

Routers and services depend on these primitives instead of reading
os.environ or formatting error responses themselves.
"""
