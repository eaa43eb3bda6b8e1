"""Modelos y constantes del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y los conjuntos de
  caracteres; el dominio no conoce la CLI.
"""
