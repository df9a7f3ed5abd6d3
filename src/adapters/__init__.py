"""Adaptadores de I/O: HTTP, git y sistema de ficheros."""
