"""Modelos y entidades del dominio.

- Estructuras de datos puras (Pydantic v2), enums y la jerarquía de errores.
- El dominio no conoce subprocesos, CLI ni archivos.
"""
