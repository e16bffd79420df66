"""Modelos y utilidades puras del dominio.

Por qué:
- Aquí viven las estructuras de datos estrictas (Pydantic v2) y la
  aritmética exacta de montos.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
