"""Contrato de fuentes de input de puzzles.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El Scaffold Builder depende de esta abstracción; los tests le pasan un fake
  en lugar de tocar la red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ScaffoldRequest


@runtime_checkable
class PuzzleInputSource(Protocol):
    """Contrato mínimo para obtener el input de un día.

    Reglas de diseño:
    - `fetch` es síncrono: una sola petición bloqueante por invocación.
    - Devuelve el texto ya recortado o lanza un `FetchError`.
    """

    def fetch(self, request: ScaffoldRequest) -> str:
        ...
