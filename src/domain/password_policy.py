"""
Password policy - Fixed rule set evaluated on every password change.

Each rule is an independent predicate. All rules are always evaluated
(no short-circuiting) so the checklist can show every unmet requirement
at once. Evaluation order is display order.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

MIN_PASSWORD_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*"

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


@dataclass(frozen=True)
class PasswordRule:
    """A single named predicate over the password string."""

    id: str
    label: str
    predicate: Callable[[str], bool]

    def check(self, password: str) -> bool:
        return bool(self.predicate(password))


@dataclass(frozen=True)
class RuleEvaluation:
    """Outcome of one rule against one password."""

    rule: PasswordRule
    satisfied: bool

    @property
    def id(self) -> str:
        return self.rule.id

    @property
    def label(self) -> str:
        return self.rule.label


PASSWORD_RULES: tuple[PasswordRule, ...] = (
    PasswordRule(
        id="min_length",
        label=f"Minimum {MIN_PASSWORD_LENGTH} characters",
        predicate=lambda password: len(password) >= MIN_PASSWORD_LENGTH,
    ),
    PasswordRule(
        id="uppercase",
        label="At least 1 uppercase letter",
        predicate=lambda password: _UPPERCASE.search(password) is not None,
    ),
    PasswordRule(
        id="lowercase",
        label="At least 1 lowercase letter",
        predicate=lambda password: _LOWERCASE.search(password) is not None,
    ),
    PasswordRule(
        id="digit",
        label="At least 1 number",
        predicate=lambda password: _DIGIT.search(password) is not None,
    ),
    PasswordRule(
        id="special",
        label=f"At least 1 special character ({SPECIAL_CHARACTERS})",
        predicate=lambda password: _SPECIAL.search(password) is not None,
    ),
)


def evaluate(password: str) -> list[RuleEvaluation]:
    """
    Evaluate every password rule, in rule order.

    Total and side-effect free: an empty password simply yields
    all rules unsatisfied.

    Args:
        password: Current password field value

    Returns:
        One RuleEvaluation per rule, ordered like PASSWORD_RULES
    """
    return [RuleEvaluation(rule=rule, satisfied=rule.check(password)) for rule in PASSWORD_RULES]


def is_satisfied(evaluations: Iterable[RuleEvaluation]) -> bool:
    """Overall validity of an existing evaluation list."""
    return all(evaluation.satisfied for evaluation in evaluations)


def is_password_valid(password: str) -> bool:
    """True iff the password satisfies every rule."""
    return is_satisfied(evaluate(password))
