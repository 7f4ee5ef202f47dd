"""CLI — командная строка курса (typer + rich)."""

from .main import app, run

__all__ = ["app", "run"]
