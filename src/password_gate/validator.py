"""Evaluate a password against every policy rule and collect the verdict."""

import logging

from pydantic import BaseModel, ConfigDict, computed_field

from password_gate.config import PolicyConfig, get_policy_config
from password_gate.rules import RULES, Rule

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    errors: tuple[str, ...] = ()

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.errors


class PolicyValidator:
    """Stateless validator bound to one immutable PolicyConfig.

    Safe to share between threads and requests: validate() reads only the
    frozen config and allocates a fresh result per call.
    """

    def __init__(self, config: PolicyConfig, rules: tuple[Rule, ...] = RULES):
        self.config = config
        self.rules = rules

    def validate(self, password: str) -> ValidationResult:
        errors: list[str] = []
        failed: list[str] = []
        for rule in self.rules:
            error = rule(password, self.config)
            if error is not None:
                errors.append(error)
                failed.append(rule.__name__)

        # Never log the password itself
        if failed:
            logger.debug("Password rejected by %d rule(s): %s", len(failed), ", ".join(failed))
        return ValidationResult(errors=tuple(errors))

    def requirements(self) -> list[str]:
        """Human-readable description of the configured policy."""
        c = self.config
        lines = [
            f"Between {c.min_length} and {c.max_length} characters",
            f"At least {c.min_classes_required} of: lowercase letters, "
            "uppercase letters, numbers, special characters",
            "Must not be a commonly used password",
            f"No character repeated more than {c.max_consecutive_repeat} times in a row",
        ]
        if c.banned_substrings:
            lines.append(
                "Must not contain common words such as "
                + ", ".join(f'"{w}"' for w in c.banned_substrings)
            )
        return lines


_validator: PolicyValidator | None = None


def get_validator() -> PolicyValidator:
    global _validator
    if _validator is None:
        _validator = PolicyValidator(get_policy_config())
    return _validator


def validate_password(password: str) -> ValidationResult:
    """Validate against the process-wide policy."""
    return get_validator().validate(password)
