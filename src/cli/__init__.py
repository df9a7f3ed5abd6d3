"""CLI de lic (Typer + Rich)."""
