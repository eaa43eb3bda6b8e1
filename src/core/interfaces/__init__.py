"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que cumplen las dependencias inyectadas.
- Permite sustituir la fuente aleatoria por una determinista en tests.
"""
