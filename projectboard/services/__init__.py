"""
High-level use cases for the projectboard API.

Each service module orchestrates the repository to implement business rules
(list/create/reorder/delete projects, admin login).

Routers (FastAPI endpoints) call these services instead of manipulating
the database or sessions directly.
"""
