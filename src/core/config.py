"""Configuración del Core.

Por qué aquí:
- Centraliza rutas y umbrales (pydantic-settings) sin contaminar la CLI.
- Los checks reciben valores ya validados en lugar de leer el entorno.

Nota: la lista de namespaces, de locales y las tablas de exención son
constantes del build (`core.domain.locales`, `core.exemptions`), no settings.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.locales import REFERENCE_LOCALE


class AppSettings(BaseSettings):
    """Configuración central de la verificación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar los checks.
    - Sin fichero `.env`: solo el entorno explícito y la CLI cambian la
      configuración de una ejecución de CI.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="I18N_VERIFY_",
        extra="ignore",
        case_sensitive=False,
    )

    project_root: Path = Field(
        default=Path("."),
        description="Raíz del proyecto UI; el resto de rutas son relativas a ella.",
    )
    locales_dir: Path = Field(
        default=Path("src/i18n/locales"),
        description="Directorio con un subdirectorio por locale.",
    )
    components_dir: Path = Field(
        default=Path("src/components"),
        description="Árbol de componentes escaneado por el check de cobertura.",
    )
    reference_locale: str = Field(
        default=REFERENCE_LOCALE,
        min_length=2,
        description="Locale de referencia (fuente de verdad de claves y textos).",
    )
    index_artifact: str = Field(
        default="index.ts",
        min_length=1,
        description="Fichero barrel/index que debe existir en cada locale.",
    )
    resource_extension: str = Field(
        default=".json",
        min_length=2,
        description="Extensión de los ficheros de namespace.",
    )
    source_extension: str = Field(
        default=".tsx",
        min_length=2,
        description="Extensión de los ficheros de componentes escaneados.",
    )
    test_suffix: str = Field(
        default=".test.tsx",
        min_length=2,
        description="Sufijo de ficheros de test excluidos del escaneo.",
    )

    max_issues_to_show: int = Field(
        default=20,
        ge=1,
        le=10_000,
        description="Máximo de issues impresos por check (solo presentación).",
    )
    untranslated_min_length: int = Field(
        default=5,
        ge=0,
        description="Un valor idéntico se marca solo si su longitud supera este umbral.",
    )
    quality_identical_min_length: int = Field(
        default=10,
        ge=0,
        description="Umbral de longitud para 'identical-to-english' en scripts no latinos.",
    )

    def resolve(self, path: Path) -> Path:
        """Resolve `path` against the project root unless it is absolute."""

        return path if path.is_absolute() else self.project_root / path

    @property
    def locales_path(self) -> Path:
        return self.resolve(self.locales_dir)

    @property
    def components_path(self) -> Path:
        return self.resolve(self.components_dir)
