"""Modelo de color."""
