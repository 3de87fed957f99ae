"""Generic interpreter for declarative field rules."""

from typing import List, Mapping, Optional, Sequence

from .rules import FieldRules


def required_message(field: str) -> str:
    return f"{field} is required"


def evaluate(
    rules: Sequence[FieldRules],
    values: Mapping[str, Optional[str]],
) -> List[str]:
    """
    Check every field and collect the violations.

    Fields are visited in rule order, so the reasons come back in that
    order too. A missing field yields only its "is required" reason; a
    present field yields the message of its first failing constraint.

    Args:
        rules: The rule set, one entry per field
        values: Raw field values, None meaning absent

    Returns:
        One reason per offending field, empty if all fields are valid
    """
    reasons: List[str] = []

    for rule in rules:
        value = values.get(rule.field)

        if value is None:
            reasons.append(required_message(rule.field))
            continue

        for constraint in rule.constraints:
            if not constraint.check(value):
                reasons.append(f"{rule.field} {constraint.message}")
                break

    return reasons
