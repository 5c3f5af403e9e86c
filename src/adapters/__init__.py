"""Adaptadores: subprocesos, sistema de archivos de Minecraft, instalador Java."""
