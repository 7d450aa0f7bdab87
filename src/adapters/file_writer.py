"""Escritura skip-if-exists.

Todas las escrituras del scaffold y del `init` pasan por aquí: si el fichero ya
existe no se toca (las ediciones del usuario nunca se pisan), y el padre debe
existir porque crear directorios es responsabilidad del llamador.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.errors import FilesystemError

logger = logging.getLogger(__name__)


def write_if_absent(path: Path, content: str) -> bool:
    """Escribe `content` en `path` solo si no existe nada ahí.

    Devuelve True si se creó el fichero y False si ya existía (no es un error).
    Lanza `FilesystemError` si el directorio padre no existe o si el sistema de
    ficheros rechaza la escritura.
    """

    if path.exists():
        logger.warning("%s already exists, leaving it untouched", path)
        return False

    if not path.parent.is_dir():
        raise FilesystemError(f"cannot create {path}: parent directory does not exist", path)

    try:
        # "x" = creación exclusiva: si alguien lo crea entre el check y aquí, no se pisa.
        with path.open("x", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except FileExistsError:
        logger.warning("%s appeared while writing, leaving it untouched", path)
        return False
    except OSError as exc:
        raise FilesystemError(f"cannot write {path}: {exc.strerror or exc}", path) from exc

    logger.debug("created %s (%d bytes)", path, len(content))
    return True
