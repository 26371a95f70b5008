"""Result types produced by a lint run.

- Finding: One located violation (pydantic model, serialisable)
- Clean: Outcome of a scan that found nothing
- FindingsPresent: Outcome of a scan that found at least one violation
- LintResult: Tagged union of the two outcomes

Findings are the useful output of a successful scan, so they are modelled as
an explicit result variant rather than raised as exceptions.
"""

from dataclasses import dataclass, field
from typing import Literal, override

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Finding(BaseModel):
    """A single typographic violation.

    Offsets are UTF-8 byte offsets into the checked text, start inclusive
    and end exclusive.

    Attributes:
        rule: Name of the rule that produced this finding
        message: Human-readable description of the violation
        start: Byte offset where the violation starts
        end: Byte offset where the violation ends

    """

    model_config = ConfigDict(frozen=True)

    rule: str = Field(min_length=1, description="Name of the producing rule")
    message: str = Field(description="Human-readable violation message")
    start: int = Field(ge=0, description="Start byte offset (inclusive)")
    end: int = Field(ge=0, description="End byte offset (exclusive)")

    @model_validator(mode="after")
    def validate_span(self) -> "Finding":
        """Ensure the span is not inverted."""
        if self.start > self.end:
            raise ValueError(
                f"Finding start ({self.start}) must not exceed end ({self.end})"
            )
        return self

    @override
    def __str__(self) -> str:
        return f"Warning: {self.message} ({self.start}, {self.end})"


@dataclass(frozen=True, slots=True)
class Clean:
    """Outcome of a scan with no violations."""

    kind: Literal["clean"] = field(default="clean", init=False)

    @property
    def is_clean(self) -> bool:
        """Always True."""
        return True

    @property
    def findings(self) -> tuple[Finding, ...]:
        """Always empty."""
        return ()


@dataclass(frozen=True, slots=True)
class FindingsPresent:
    """Outcome of a scan with at least one violation.

    Attributes:
        findings: Non-empty, ordered tuple of findings

    """

    findings: tuple[Finding, ...]
    kind: Literal["findings_present"] = field(default="findings_present", init=False)

    def __post_init__(self) -> None:
        """Freeze the findings into a tuple and reject an empty one."""
        object.__setattr__(self, "findings", tuple(self.findings))
        if not self.findings:
            raise ValueError("FindingsPresent requires at least one finding")

    @property
    def is_clean(self) -> bool:
        """Always False."""
        return False


LintResult = Clean | FindingsPresent


def result_from_findings(findings: list[Finding] | tuple[Finding, ...]) -> LintResult:
    """Wrap accumulated findings in the matching result variant.

    Args:
        findings: Findings in discovery order

    Returns:
        Clean when there are no findings, FindingsPresent otherwise.

    """
    if not findings:
        return Clean()
    return FindingsPresent(findings=tuple(findings))
