"""Servicios del Core (orquestación sin efectos de consola)."""
