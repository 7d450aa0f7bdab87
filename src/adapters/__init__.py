"""Adaptadores de I/O: filesystem, HTTP (httpx) y subprocess (cargo)."""
