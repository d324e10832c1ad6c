"""HTTP interface: FastAPI application, routes and middleware."""
