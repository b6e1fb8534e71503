"""
Result Models for the demo run

- DomainListing: what ListDomains plus per-domain DomainMetadata reported
- StepOutcome: typed success/failure of one demo step
- RunReport: ordered outcomes of a whole run
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..exceptions import ServiceError


class DomainListing(BaseModel):
    """Domains returned by ListDomains with their item counts."""

    domain_names: List[str] = Field(default_factory=list)
    item_counts: List[int] = Field(default_factory=list, description="Item count of each entry in domain_names")

    @model_validator(mode='after')
    def check_counts_align(self):
        if len(self.item_counts) != len(self.domain_names):
            raise ValueError(
                f"Got {len(self.item_counts)} item counts for {len(self.domain_names)} domains"
            )
        return self

    @property
    def domain_count(self) -> int:
        return len(self.domain_names)

    @property
    def total_item_count(self) -> int:
        return sum(self.item_counts)


class StepOutcome(BaseModel):
    """Outcome of one demo step.

    Exactly one of ``value``/``error`` is meaningful: ``value`` when ``ok``,
    ``error`` otherwise.
    """

    step: str
    ok: bool
    value: Any = None
    error: Optional[ServiceError] = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def success(cls, step: str, value: Any = None) -> 'StepOutcome':
        return cls(step=step, ok=True, value=value)

    @classmethod
    def failure(cls, step: str, error: ServiceError) -> 'StepOutcome':
        return cls(step=step, ok=False, error=error)


class RunReport(BaseModel):
    """Ordered outcomes of a demo run; stops at the first failed step."""

    outcomes: List[StepOutcome] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return all(outcome.ok for outcome in self.outcomes)

    @property
    def error(self) -> Optional[ServiceError]:
        for outcome in self.outcomes:
            if not outcome.ok:
                return outcome.error
        return None

    @property
    def steps(self) -> List[str]:
        return [outcome.step for outcome in self.outcomes]

    def value_of(self, step: str) -> Any:
        """Return the value a successful step produced, or None."""
        for outcome in self.outcomes:
            if outcome.step == step and outcome.ok:
                return outcome.value
        return None
