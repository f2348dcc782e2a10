# utils/ensure.py
from __future__ import annotations
import os
from typing import Any

from domain.errors import InvalidArgument


def ensure_not_blank(value: Any, name: str) -> str:
    """
    Comprueba que 'value' sea una ruta/texto con contenido y la devuelve como str.
    None, "", "   " o tipos no textuales → InvalidArgument.
    """
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(name)
    return value
