"""Dominio del verificador: recursos, tokens, locales y resultados.

Por qué:
- Árboles de recursos y tokens son estructuras puras, sin E/S.
- Los resultados (Pydantic v2) son el único contrato entre checks,
  CLI y exportadores.
"""
