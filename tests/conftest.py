"""
Fixtures compartidos: árboles de locales temporales y ResourceSets en memoria.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from core.config import AppSettings
from core.domain.locales import NAMESPACES, REFERENCE_LOCALE, TARGET_LOCALES
from core.domain.resources import ResourceSet, build_tree, flatten
from core.exemptions import ExemptionRules
from core.interfaces.check import SourceFile, VerificationContext

# Valores cortos e idénticos: pasan todos los checks en todos los locales.
BASELINE: dict[str, Any] = {
    "ok": "OK",
    "actions": {"save": "Save", "quit": "Quit"},
    "shortcuts": ["Ctrl+S", "Ctrl+Q"],
}

CLEAN_COMPONENT = """\
export function SaveButton({ t }: Props) {
  return <button className="btn-primary" title={t('common:actions.save')}>{t('common:actions.save')}</button>;
}
"""


class ProjectBuilder:
    """Crea un proyecto UI mínimo en disco (locales + componentes)."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.locales_dir = root / "src" / "i18n" / "locales"
        self.components_dir = root / "src" / "components"

    def write_namespace(self, locale: str, namespace: str, data: Any) -> Path:
        path = self.locales_dir / locale / f"{namespace}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        return path

    def write_raw(self, locale: str, filename: str, text: str) -> Path:
        path = self.locales_dir / locale / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def add_locale(
        self,
        locale: str,
        data: dict[str, Any] | None = None,
        *,
        namespaces: tuple[str, ...] = NAMESPACES,
        index: bool = True,
    ) -> None:
        data = data or {}
        for namespace in namespaces:
            self.write_namespace(locale, namespace, data.get(namespace, BASELINE))
        if index:
            self.write_raw(locale, "index.ts", "export {};\n")

    def add_component(self, relative: str, text: str) -> Path:
        path = self.components_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def build_clean(self) -> "ProjectBuilder":
        self.add_locale(REFERENCE_LOCALE)
        for locale in TARGET_LOCALES:
            self.add_locale(locale)
        self.add_component("SaveButton.tsx", CLEAN_COMPONENT)
        self.add_component("SaveButton.test.tsx", "render(<div>Hardcoded Test Text</div>);\n")
        return self

    def settings(self, **overrides: Any) -> AppSettings:
        return AppSettings(project_root=self.root, **overrides)


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    return ProjectBuilder(tmp_path)


@pytest.fixture
def clean_project(project: ProjectBuilder) -> ProjectBuilder:
    return project.build_clean()


def make_resources(
    reference: dict[str, dict[str, Any]],
    targets: dict[str, dict[str, dict[str, Any]]],
) -> ResourceSet:
    """ResourceSet en memoria; los namespaces son las claves de `reference`."""

    resources = ResourceSet(reference_locale=REFERENCE_LOCALE, namespaces=tuple(reference))
    resources.reference = {ns: flatten(build_tree(data)) for ns, data in reference.items()}
    for locale, namespaces in targets.items():
        resources.targets[locale] = {ns: flatten(build_tree(data)) for ns, data in namespaces.items()}
    return resources


@pytest.fixture
def make_context() -> Callable[..., VerificationContext]:
    def _make(
        reference: dict[str, dict[str, Any]] | None = None,
        targets: dict[str, dict[str, dict[str, Any]]] | None = None,
        *,
        rules: ExemptionRules | None = None,
        sources: dict[str, str] | None = None,
    ) -> VerificationContext:
        return VerificationContext(
            resources=make_resources(reference or {}, targets or {}),
            rules=rules or ExemptionRules(),
            sources=tuple(SourceFile(path=p, text=t) for p, t in (sources or {}).items()),
        )

    return _make
