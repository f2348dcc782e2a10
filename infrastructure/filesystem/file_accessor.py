# infrastructure/filesystem/file_accessor.py
# Acceso a disco: utilidades de rutas, guardado con copia de seguridad y lectura
from __future__ import annotations
import codecs
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Union

from utils.ensure import ensure_not_blank

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]

# UTF-32 antes que UTF-16: BOM_UTF32_LE empieza por BOM_UTF16_LE
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def backup_suffix(now: datetime | None = None) -> str:
    """Sufijo '.yyyyMMddHHmmssfff' (hora local, precisión de milisegundos)."""
    now = now or datetime.now()
    return "." + now.strftime("%Y%m%d%H%M%S") + f"{now.microsecond // 1000:03d}"


def detect_encoding(data: bytes) -> str:
    """Codec según el BOM inicial; sin BOM → UTF-8."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding
    return "utf-8"


class FileAccessor:
    """
    Envoltorio sin estado sobre las primitivas del sistema de ficheros.

    - file_name / full_path / directory_name / ensure_directory / save /
      read_stream / read_text validan la ruta (InvalidArgument antes de tocar disco).
    - file_extension / file_exists / combine aceptan cualquier entrada.
    - Los errores de E/S (OSError) se propagan tal cual.
    """

    # ───────── rutas ─────────
    def file_name(self, path: PathArg) -> str:
        path = ensure_not_blank(path, "path")
        return os.path.basename(path)

    def file_extension(self, path: PathArg | None) -> str:
        """
        Extensión con el punto, tomada desde el último "." del nombre.
        "file." → "", ".bashrc" → ".bashrc", "a.tar.gz" → ".gz".
        """
        if path is None:
            return ""
        name = os.path.basename(os.fspath(path))
        dot = name.rfind(".")
        if dot == -1 or dot == len(name) - 1:
            return ""
        return name[dot:]

    def file_exists(self, path: PathArg | None) -> bool:
        if path is None:
            return False
        path = os.fspath(path)
        if not path.strip():
            return False
        return os.path.isfile(path)

    def combine(self, *paths: PathArg) -> str:
        if not paths:
            return ""
        return os.path.join(*paths)

    def full_path(self, path: PathArg) -> str:
        path = ensure_not_blank(path, "path")
        return os.path.abspath(path)

    def directory_name(self, path: PathArg) -> str:
        path = ensure_not_blank(path, "path")
        return os.path.dirname(path)

    def ensure_directory(self, path: PathArg) -> str:
        directory = Path(self.full_path(path))
        if not directory.is_dir():
            logger.debug("Creando directorio %s", directory)
            directory.mkdir(parents=True, exist_ok=True)
        return str(directory)

    # ───────── escritura ─────────
    def save(self, path: PathArg, content_stream: BinaryIO) -> str | None:
        """
        Guarda el contenido restante de 'content_stream' en 'path'.

        Si ya existe un fichero en esa ruta se renombra antes a
        '<ruta>.<yyyyMMddHHmmssfff>' y se devuelve la ruta de esa copia
        (None si no había nada que respaldar). Si la copia de ese mismo
        milisegundo ya existe → FileExistsError y no se toca nada.

        El stream NO se cierra (es del llamador) y se lee entero en memoria:
        para ficheros muy grandes el coste es su tamaño completo.
        """
        path = ensure_not_blank(path, "path")
        target = Path(self.full_path(path))
        self.ensure_directory(self.directory_name(str(target)))

        # se lee antes de respaldar: si el stream falla, el fichero actual sigue en su sitio
        data = content_stream.read()
        if isinstance(data, str):
            data = data.encode("utf-8")

        backup: str | None = None
        if self.file_exists(target):
            backup = str(target) + backup_suffix()
            if os.path.lexists(backup):
                raise FileExistsError(f"La copia de seguridad ya existe: {backup}")
            os.rename(target, backup)
            logger.info("Copia de seguridad %s -> %s", target.name, Path(backup).name)

        # 'x': creación exclusiva; si otro escritor se adelanta → FileExistsError
        with open(target, "xb") as fh:
            fh.write(data)
        logger.debug("Guardado %s (%d bytes)", target, len(data))
        return backup

    # ───────── lectura ─────────
    def read_stream(self, path: PathArg) -> BinaryIO | None:
        """Devuelve un stream abierto en lectura (lo cierra el llamador) o None si no existe."""
        path = ensure_not_blank(path, "path")
        full = self.full_path(path)
        if self.file_exists(full):
            return open(full, "rb")
        logger.debug("read_stream: no existe %s", full)
        return None

    def read_text(self, path: PathArg, encoding: str | None = None) -> str:
        """
        Texto completo del fichero, o "" si no existe.

        Sin 'encoding' el codec se detecta por el BOM (UTF-8/16/32, por defecto
        UTF-8) y los bytes inválidos se sustituyen por U+FFFD. Con 'encoding'
        explícito la decodificación es estricta.
        """
        path = ensure_not_blank(path, "path")
        full = self.full_path(path)
        if self.file_exists(full):
            data = Path(full).read_bytes()
            if encoding:
                return data.decode(encoding)
            return data.decode(detect_encoding(data), errors="replace")
        logger.debug("read_text: no existe %s", full)
        return ""
