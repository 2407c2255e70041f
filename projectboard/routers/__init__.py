"""
FastAPI routers grouped by domain (projects, auth, pages).

Each module exposes an APIRouter included by the application factory in
app.py.
"""
