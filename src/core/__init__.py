"""Core de lic: configuración, dominio y servicios sin dependencias de la CLI."""
