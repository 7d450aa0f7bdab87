"""Casos de uso: scaffold de un día e inicialización del workspace."""
