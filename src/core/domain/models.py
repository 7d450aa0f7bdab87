"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde (día 1..25, año del evento) sin lógica en la CLI.
- Los modelos describen *qué* se genera, no *cómo* se escribe en disco.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

FIRST_EVENT_YEAR = 2015


def current_year() -> int:
    return datetime.now(timezone.utc).year


class ScaffoldRequest(BaseModel):
    """Un día concreto de un año del evento.

    Inmutable: se crea a partir de los flags de la CLI y solo se usa para
    derivar rutas y la URL del input.
    """

    model_config = ConfigDict(frozen=True)

    day: int = Field(
        ...,
        ge=1,
        le=25,
        description="Día del puzzle (1-25).",
    )
    year: int = Field(
        default_factory=current_year,
        ge=FIRST_EVENT_YEAR,
        description="Año del evento; por defecto el año en curso (UTC).",
    )

    @property
    def day_dir_name(self) -> str:
        return f"day{self.day:02d}"

    @property
    def package_name(self) -> str:
        """Nombre del crate, p.ej. `day01-2024` (para `cargo run -p`)."""

        return f"{self.day_dir_name}-{self.year}"

    @property
    def relative_dir(self) -> Path:
        return Path("solutions") / str(self.year) / self.day_dir_name

    @property
    def input_path(self) -> str:
        # El sitio no rellena con ceros: /2024/day/1/input
        return f"/{self.year}/day/{self.day}/input"


class FileOutcome(BaseModel):
    """Resultado de una escritura skip-if-exists."""

    path: Path = Field(..., description="Ruta del fichero gestionado.")
    created: bool = Field(
        default=False,
        description="True si se escribió; False si ya existía y se respetó.",
    )


class ScaffoldReport(BaseModel):
    """Lo que hizo `build_scaffold` para un día."""

    request: ScaffoldRequest
    day_dir: Path
    files: list[FileOutcome] = Field(default_factory=list)

    @property
    def created(self) -> list[Path]:
        return [f.path for f in self.files if f.created]

    @property
    def skipped(self) -> list[Path]:
        return [f.path for f in self.files if not f.created]
