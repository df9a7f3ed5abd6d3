"""Modelos y errores del dominio.

Aquí viven las estructuras de datos (Pydantic v2) y la jerarquía de errores.
El dominio no conoce HTTP, CLI ni subprocess.
"""
