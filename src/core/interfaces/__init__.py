"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los checks concretos.
- Permite que el pipeline ejecute cualquier check sin conocer su lógica.
"""
