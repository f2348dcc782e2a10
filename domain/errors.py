# domain/errors.py
from __future__ import annotations


class InvalidArgument(ValueError):
    """Argumento obligatorio nulo, vacío o solo con espacios. Se lanza antes de cualquier E/S."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"El argumento '{name}' no puede ser nulo ni estar vacío")
