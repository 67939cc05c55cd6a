"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los drivers dependen de abstracciones.
"""
