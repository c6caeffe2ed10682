"""Carga de recursos de traducción (un JSON por namespace y locale).

Estructura esperada:
- <locales_dir>/<locale>/<namespace>.json
- <locales_dir>/<locale>/index.ts   (barrel que re-exporta los namespaces)

Reglas:
- Un fichero ausente o ilegible se registra como issue de integridad
  estructural y se trata como árbol vacío; la ejecución nunca se aborta.
- Solo la ausencia del locale de referencia es fatal.
- El loader nunca escribe en disco.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from core.domain.models import CheckId, Issue, IssueKind
from core.domain.resources import EMPTY_TREE, NamespaceIndex, ResourceSet, ResourceTree, build_tree, flatten
from core.errors import ReferenceLocaleMissingError, ResourceParseError

logger = logging.getLogger(__name__)


@dataclass
class LoaderOptions:
    namespaces: Sequence[str]
    index_artifact: str = "index.ts"
    extension: str = ".json"


@dataclass
class LoadResult:
    resources: ResourceSet
    issues: list[Issue] = field(default_factory=list)


def read_namespace(path: Path) -> ResourceTree:
    """Parse one namespace file. Raises `ResourceParseError` on any failure."""

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceParseError(path, str(exc)) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ResourceParseError(path, f"line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ResourceParseError(path, f"root must be an object, got {type(data).__name__}")
    return build_tree(data)


def _structure_issue(kind: IssueKind, locale: str, message: str, namespace: str | None = None) -> Issue:
    return Issue(
        check_id=CheckId.STRUCTURE,
        kind=kind,
        locale=locale,
        namespace=namespace,
        message=message,
    )


def load_locale(
    locale_dir: Path,
    locale: str,
    options: LoaderOptions,
) -> tuple[dict[str, NamespaceIndex], list[Issue]]:
    """Load every namespace of one locale directory.

    Returns the flattened indexes (empty for absent/broken files) plus the
    structural issues found for this locale.
    """

    issues: list[Issue] = []
    indexes: dict[str, NamespaceIndex] = {}

    if not locale_dir.is_dir():
        logger.warning("Locale directory missing: %s", locale_dir)
        issues.append(_structure_issue(IssueKind.MISSING_LOCALE, locale, f"Missing locale directory: {locale_dir.name}"))
        for namespace in options.namespaces:
            filename = f"{namespace}{options.extension}"
            issues.append(_structure_issue(IssueKind.MISSING_FILE, locale, f"Missing file: {filename}", namespace))
            indexes[namespace] = flatten(EMPTY_TREE)
        return indexes, issues

    for namespace in options.namespaces:
        filename = f"{namespace}{options.extension}"
        path = locale_dir / filename
        tree: ResourceTree = EMPTY_TREE
        if not path.is_file():
            issues.append(_structure_issue(IssueKind.MISSING_FILE, locale, f"Missing file: {filename}", namespace))
        else:
            try:
                tree = read_namespace(path)
                logger.debug("Loaded %s/%s", locale, filename)
            except ResourceParseError as exc:
                logger.warning("[%s] %s", locale, exc)
                issues.append(
                    _structure_issue(
                        IssueKind.PARSE_ERROR,
                        locale,
                        f"JSON parse error: {filename} ({exc.reason})",
                        namespace,
                    )
                )
        indexes[namespace] = flatten(tree)

    found = sorted(p.name for p in locale_dir.iterdir() if p.is_file() and p.name.endswith(options.extension))
    if len(found) != len(options.namespaces):
        issues.append(
            _structure_issue(
                IssueKind.FILE_COUNT,
                locale,
                f"Expected {len(options.namespaces)} {options.extension} files, found {len(found)}",
            )
        )

    if not (locale_dir / options.index_artifact).is_file():
        issues.append(
            _structure_issue(
                IssueKind.MISSING_INDEX,
                locale,
                f"Missing {options.index_artifact} barrel export",
            )
        )

    return indexes, issues


def load_resource_set(
    *,
    locales_dir: Path,
    reference_locale: str,
    target_locales: Sequence[str],
    options: LoaderOptions,
) -> LoadResult:
    """Load the reference locale and every target locale.

    Raises `ReferenceLocaleMissingError` when the reference directory is
    absent; everything else is reported through `LoadResult.issues`.
    """

    reference_dir = locales_dir / reference_locale
    if not reference_dir.is_dir():
        raise ReferenceLocaleMissingError(reference_locale, reference_dir)

    resources = ResourceSet(reference_locale=reference_locale, namespaces=tuple(options.namespaces))
    reference, issues = load_locale(reference_dir, reference_locale, options)
    resources.reference = reference

    for locale in target_locales:
        indexes, locale_issues = load_locale(locales_dir / locale, locale, options)
        resources.targets[locale] = indexes
        issues.extend(locale_issues)

    logger.debug(
        "Loaded %d target locale(s) x %d namespace(s), %d structural issue(s)",
        len(resources.targets),
        len(options.namespaces),
        len(issues),
    )
    return LoadResult(resources=resources, issues=issues)
