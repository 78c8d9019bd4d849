"""Carga de configuración y validación de tokens."""
