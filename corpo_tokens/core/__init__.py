"""Infraestructura transversal (logging)."""
