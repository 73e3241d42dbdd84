"""Declarative field validation applied to dataclass instances."""

from __future__ import annotations

import dataclasses
import operator
import re
from enum import Enum
from typing import Any, Callable, Iterable, Optional

ERR_INVALID_TYPE = "tipo de dato inválido"
ERR_FIELD_NOT_FOUND = "campo no encontrado"
ERR_VALIDATION_FAILED = "validación fallida"


class RuleType(str, Enum):
    """Kinds of check a validation rule can perform."""

    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    GREATER_THAN = "GreatThat"
    GREATER_OR_EQUAL = "ShouldGreaterOrEqualThan"
    LESS_THAN = "LessThat"
    LESS_OR_EQUAL = "LessOrEqualThat"
    EMPTY = "Empty"
    NOT_EMPTY = "NotEmpty"
    MATCH = "Match"
    NOT_MATCH = "NoMatch"
    LENGTH = "Length"
    MIN_LENGTH = "MinLenth"
    MUST = "Must"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass
class RuleViolation:
    """A failed rule: the field, the rule, the configured message and the detail."""

    field: str
    rule: Optional[RuleType]
    message: str
    exception: str = ""


_COMPARISONS: dict[RuleType, tuple[Callable[[int, int], bool], str]] = {
    RuleType.GREATER_THAN: (operator.gt, "debe ser mayor que"),
    RuleType.GREATER_OR_EQUAL: (operator.ge, "debe ser mayor o igual a"),
    RuleType.LESS_THAN: (operator.lt, "debe ser menor que"),
    RuleType.LESS_OR_EQUAL: (operator.le, "debe ser menor o igual a"),
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _fmt(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _deep_equal(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def _byte_length(text: str) -> int:
    return len(str.encode(text, "utf-8"))


@dataclasses.dataclass
class ValidationRule:
    """One rule bound to a named field."""

    field_name: str
    rule: RuleType
    expected: Any = None
    message: str = ""

    def validate(self, value: Any) -> Optional[RuleViolation]:
        """Check value against the rule; return the violation or None."""
        name = self.field_name
        rule = self.rule
        expected = self.expected

        def violation(exception: str) -> RuleViolation:
            return RuleViolation(name, rule, self.message, exception)

        wrong_type = f"tipo inválido para {name}"

        if rule is RuleType.EQUAL:
            if not _deep_equal(value, expected):
                return RuleViolation(
                    name, rule, f"el campo {name} debe ser igual a {_fmt(expected)}"
                )
        elif rule is RuleType.NOT_EQUAL:
            if _deep_equal(value, expected):
                return violation(f"el campo {name} no debe ser igual a {_fmt(expected)}")
        elif rule in _COMPARISONS:
            compare, wording = _COMPARISONS[rule]
            if not (_is_int(value) and _is_int(expected)):
                return violation(wrong_type)
            if not compare(value, expected):
                return violation(f"el campo {name} {wording} {_fmt(expected)}")
        elif rule is RuleType.EMPTY:
            if isinstance(value, str) and value != "":
                return violation(f"el campo {name} debe estar vacío")
        elif rule is RuleType.NOT_EMPTY:
            if isinstance(value, str) and value == "":
                return violation(f"el campo {name} no debe estar vacío")
        elif rule is RuleType.MATCH:
            if not (isinstance(value, str) and isinstance(expected, str)):
                return violation(wrong_type)
            if re.search(str(expected), str(value)) is None:
                return violation(
                    f"el campo {name} no coincide con el patrón {_fmt(expected)}"
                )
        elif rule is RuleType.LENGTH:
            if not (isinstance(value, str) and _is_int(expected)):
                return violation(wrong_type)
            if _byte_length(value) != expected:
                return violation(f"el campo {name} debe tener longitud {_fmt(expected)}")
        elif rule is RuleType.MIN_LENGTH:
            if not (isinstance(value, str) and _is_int(expected)):
                return violation(wrong_type)
            if _byte_length(value) < expected:
                return violation(
                    f"el campo {name} debe tener al menos {_fmt(expected)} caracteres"
                )
        elif rule is RuleType.MUST:
            if not callable(expected):
                return violation(
                    f"tipo inválido para la regla Must en el campo {name}"
                )
            valid, detail = expected(value)
            if not valid:
                return violation(detail)
        return None


@dataclasses.dataclass
class PartialRule:
    """A rule not yet bound to a field."""

    rule: RuleType
    expected: Any = None
    message: str = ""


@dataclasses.dataclass
class ValidationResult:
    """The violations found by a validation run."""

    errors: list[RuleViolation] = dataclasses.field(default_factory=list)

    def is_valid(self) -> bool:
        """True when no rule was violated."""
        return not self.errors


class ValidatorEngine:
    """An ordered set of field rules applied to dataclass instances."""

    def __init__(self) -> None:
        self._rules: list[ValidationRule] = []

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        """The rules in the order they were added."""
        return tuple(self._rules)

    def add_rule(
        self, field_name: str, rule: RuleType, expected: Any = None, message: str = ""
    ) -> None:
        """Add one rule for a field."""
        self._rules.append(ValidationRule(field_name, rule, expected, message))

    def add_rules(self, field_name: str, rules: Iterable[PartialRule]) -> None:
        """Add several rules for the same field, keeping their order."""
        for partial in rules:
            self.add_rule(field_name, partial.rule, partial.expected, partial.message)

    def validate(self, data: Any) -> ValidationResult:
        """Apply every rule to the matching field of a dataclass instance."""
        if not dataclasses.is_dataclass(data) or isinstance(data, type):
            return ValidationResult([RuleViolation("", None, ERR_INVALID_TYPE)])

        names = {item.name for item in dataclasses.fields(data)}
        result = ValidationResult()
        for rule in self._rules:
            if rule.field_name not in names:
                result.errors.append(
                    RuleViolation(rule.field_name, rule.rule, ERR_FIELD_NOT_FOUND)
                )
                continue
            found = rule.validate(getattr(data, rule.field_name))
            if found is not None:
                result.errors.append(found)
        return result