"""Manifest validator entry point and validation report.

The validator runs a fixed, ordered sequence of rules and stops at the first
violation. Accepted manifests are returned as the same object; rejected ones
raise a ``ManifestValidationError`` subclass naming the violated rule.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from ..config import SgvalConfig, create_default_config
from ..models import SubgraphManifest
from .errors import ManifestValidationError
from .rules import DEFAULT_RULES, ValidationRule

logger = logging.getLogger(__name__)


class ValidationStatus(str, Enum):
    """Overall validation status."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class ValidationIssue:
    """The rule violation that rejected a manifest."""
    rule: str
    error: ManifestValidationError

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def path(self) -> str | None:
        return self.error.path

    def __str__(self) -> str:
        location = f" at {self.path}" if self.path else ""
        return f"[{self.error.kind.value.upper()}] {self.rule}: {self.error}{location}"


@dataclass
class ValidationResult:
    """Outcome of validating one manifest, for reporting."""
    status: ValidationStatus
    issues: list[ValidationIssue] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.status == ValidationStatus.PASS else 1

    @property
    def error(self) -> ManifestValidationError | None:
        return self.issues[0].error if self.issues else None

    def add_issue(self, rule: str, error: ManifestValidationError) -> None:
        """Record a rule violation; any issue fails the result."""
        self.issues.append(ValidationIssue(rule, error))
        self.status = ValidationStatus.FAIL

    def increment_counter(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        self.counters[name] = self.counters.get(name, 0) + value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "issues": [
                {"rule": issue.rule, **issue.error.to_dict()}
                for issue in self.issues
            ],
        }


class ManifestValidator:
    """Validate subgraph manifests before registration."""

    def __init__(self, config: SgvalConfig | None = None):
        self.config = config or create_default_config()
        self.rules: tuple[ValidationRule, ...] = DEFAULT_RULES

    def _first_violation(self, manifest: SubgraphManifest) -> tuple[ValidationRule, ManifestValidationError] | None:
        for rule in self.rules:
            logger.debug(f"Executing rule: {rule.name}")
            error = rule.check(manifest, self.config)
            if error is not None:
                logger.debug(f"Rule {rule.name} rejected manifest: {error}")
                return rule, error
        return None

    def validate(self, manifest: SubgraphManifest) -> SubgraphManifest:
        """Validate a manifest.

        Args:
            manifest: Parsed subgraph manifest

        Returns:
            The same manifest object, unchanged, if every rule holds

        Raises:
            ManifestValidationError: For the first rule the manifest violates
        """
        violation = self._first_violation(manifest)
        if violation is not None:
            raise violation[1]
        return manifest

    def check(self, manifest: SubgraphManifest) -> ValidationResult:
        """Validate a manifest and return a report instead of raising."""
        result = ValidationResult(status=ValidationStatus.PASS)

        result.increment_counter("data_sources", len(manifest.data_sources))
        for data_source in manifest.data_sources:
            result.increment_counter("call_handlers", len(data_source.mapping.call_handlers))
            result.increment_counter("block_handlers", len(data_source.mapping.block_handlers))

        violation = self._first_violation(manifest)
        if violation is None:
            result.increment_counter("rules_passed", len(self.rules))
        else:
            rule, error = violation
            result.increment_counter("rules_passed", self.rules.index(rule))
            result.add_issue(rule.name, error)

        return result


def validate_manifest(manifest: SubgraphManifest, config: SgvalConfig | None = None) -> SubgraphManifest:
    """Validate a manifest with a one-off validator.

    Returns the manifest unchanged or raises ``ManifestValidationError``.
    """
    return ManifestValidator(config).validate(manifest)
