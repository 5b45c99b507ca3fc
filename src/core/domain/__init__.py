"""Tipos y errores del dominio.

Por qué:
- Aquí viven los conceptos puros del problema (modos de copia, errores).
- El dominio no conoce CLI, archivos ni consola.
"""
