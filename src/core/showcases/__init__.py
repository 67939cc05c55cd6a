"""Showcases de principios SOLID.

Por qué un paquete:
- Un módulo por principio; ninguno importa a otro.
- Cada módulo expone sus tipos y un `demonstrate()` que los ejecuta en línea recta.
"""
