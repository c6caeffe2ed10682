"""Verification orchestration.

This module wires the loader, the exemption rules and the checks into a
single linear pipeline. The CLI delegates everything except presentation to
these helpers, which keeps the pipeline reusable for other entry-points
(CI scripts, tests) and keeps side-effects (printing, exit codes) out of the
core logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from adapters.resource_loader import LoaderOptions, load_resource_set
from adapters.source_files import iter_sources
from core.checks import (
    InterpolationCheck,
    KeyCompletenessCheck,
    PlaceholderLeakageCheck,
    SourceCoverageCheck,
    StructuralIntegrityCheck,
    TranslationQualityCheck,
    UntranslatedStringCheck,
)
from core.config import AppSettings
from core.domain.locales import NAMESPACES, TARGET_LOCALES
from core.domain.models import CheckId, CheckResult, Issue, IssueKind, LocaleStats, VerificationReport
from core.domain.resources import ResourceSet
from core.errors import ReferenceLocaleMissingError
from core.exemptions import ExemptionRules, default_rules
from core.interfaces.check import Thresholds, VerificationCheck, VerificationContext

logger = logging.getLogger(__name__)


@dataclass
class VerifyRequest:
    """Parameters that control one verification run."""

    target_locales: Sequence[str] = TARGET_LOCALES
    namespaces: Sequence[str] = NAMESPACES
    scan_sources: bool = True


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress)."""

    check_start: Callable[[CheckId], None] | None = None
    check_done: Callable[[CheckResult], None] | None = None


def default_checks() -> list[VerificationCheck]:
    """All checks, in report order."""

    return [
        StructuralIntegrityCheck(),
        KeyCompletenessCheck(),
        InterpolationCheck(),
        PlaceholderLeakageCheck(),
        UntranslatedStringCheck(),
        SourceCoverageCheck(),
        TranslationQualityCheck(),
    ]


def build_context(
    *,
    settings: AppSettings,
    request: VerifyRequest,
    rules: ExemptionRules,
) -> VerificationContext:
    """Load everything the checks need. Raises `ReferenceLocaleMissingError`."""

    loaded = load_resource_set(
        locales_dir=settings.locales_path,
        reference_locale=settings.reference_locale,
        target_locales=[loc for loc in request.target_locales if loc != settings.reference_locale],
        options=LoaderOptions(
            namespaces=request.namespaces,
            index_artifact=settings.index_artifact,
            extension=settings.resource_extension,
        ),
    )

    sources = ()
    if request.scan_sources:
        sources = tuple(
            iter_sources(
                settings.components_path,
                base=settings.project_root,
                extension=settings.source_extension,
                test_suffix=settings.test_suffix,
            )
        )
        logger.debug("Collected %d source file(s) from %s", len(sources), settings.components_path)

    return VerificationContext(
        resources=loaded.resources,
        rules=rules,
        structural_issues=tuple(loaded.issues),
        sources=sources,
        thresholds=Thresholds(
            untranslated_min_length=settings.untranslated_min_length,
            quality_identical_min_length=settings.quality_identical_min_length,
        ),
    )


def compute_locale_stats(resources: ResourceSet) -> list[LocaleStats]:
    """Reference key count vs. keys present, per target locale."""

    stats: list[LocaleStats] = []
    for locale in resources.target_locales:
        reference_keys = 0
        present_keys = 0
        for namespace in resources.namespaces:
            reference = resources.reference_index(namespace)
            target = resources.target_index(locale, namespace)
            reference_keys += len(reference)
            present_keys += sum(1 for path in reference.paths if path in target)
        stats.append(LocaleStats(locale=locale, reference_keys=reference_keys, present_keys=present_keys))
    return stats


def run_checks(
    context: VerificationContext,
    *,
    checks: Sequence[VerificationCheck] | None = None,
    hooks: PipelineHooks | None = None,
) -> list[CheckResult]:
    hooks = hooks or PipelineHooks()
    results: list[CheckResult] = []
    for check in checks if checks is not None else default_checks():
        if hooks.check_start:
            hooks.check_start(check.check_id)
        logger.debug("Running check %s", check.check_id.value)
        result = check.run(context)
        logger.debug("Check %s finished with %d issue(s)", check.check_id.value, len(result.issues))
        results.append(result)
        if hooks.check_done:
            hooks.check_done(result)
    return results


def fatal_report(exc: ReferenceLocaleMissingError) -> VerificationReport:
    """Report for a run that could not load its reference locale."""

    issue = Issue(
        check_id=CheckId.STRUCTURE,
        kind=IssueKind.FATAL,
        locale=exc.locale,
        message=str(exc),
    )
    return VerificationReport(
        results=[CheckResult(check_id=CheckId.STRUCTURE, issues=[issue])],
        fatal_error=str(exc),
    )


def verify(
    *,
    settings: AppSettings,
    request: VerifyRequest | None = None,
    rules: ExemptionRules | None = None,
    checks: Sequence[VerificationCheck] | None = None,
    hooks: PipelineHooks | None = None,
) -> VerificationReport:
    """Run a full, fresh verification pass and return the aggregated report."""

    request = request or VerifyRequest()
    rules = rules or default_rules()

    try:
        context = build_context(settings=settings, request=request, rules=rules)
    except ReferenceLocaleMissingError as exc:
        logger.error("%s", exc)
        return fatal_report(exc)

    results = run_checks(context, checks=checks, hooks=hooks)
    return VerificationReport(
        results=results,
        locale_stats=compute_locale_stats(context.resources),
    )
