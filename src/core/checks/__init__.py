"""Checks de verificación (uno por módulo).

Cada módulo implementa `core.interfaces.check.VerificationCheck`.
"""

from core.checks.completeness import KeyCompletenessCheck
from core.checks.coverage import SourceCoverageCheck
from core.checks.interpolation import InterpolationCheck
from core.checks.placeholders import PlaceholderLeakageCheck
from core.checks.quality import TranslationQualityCheck
from core.checks.structure import StructuralIntegrityCheck
from core.checks.untranslated import UntranslatedStringCheck

__all__ = [
	"InterpolationCheck",
	"KeyCompletenessCheck",
	"PlaceholderLeakageCheck",
	"SourceCoverageCheck",
	"StructuralIntegrityCheck",
	"TranslationQualityCheck",
	"UntranslatedStringCheck",
]
