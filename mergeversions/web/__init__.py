"""API HTTP (FastAPI) de declenchement des passages."""
