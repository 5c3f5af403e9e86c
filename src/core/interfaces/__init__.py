"""Interfaces/abstracciones del Core.

- Define contratos (Protocol) que implementan adaptadores concretos.
- El Core depende de abstracciones, no del instalador Java.
"""
