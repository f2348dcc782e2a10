# domain/models.py
from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
