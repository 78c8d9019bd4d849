"""Cálculos de contraste WCAG y simulación de daltonismo."""
