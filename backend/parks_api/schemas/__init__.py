"""Pydantic schemas shared by the loader, the services and the routes."""
