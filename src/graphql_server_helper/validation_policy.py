"""Validation policies

A validation policy decides which validation rules are run against the document of
an operation before it is executed.
"""

from typing import Any, Callable, Collection, Tuple, Type

from graphql import ASTValidationRule, specified_rules
from graphql.pyutils import inspect, is_collection

from .error import ConfigurationError
from .operation_params import OperationParams

__all__ = [
    "DefaultRules",
    "DynamicRules",
    "RuleType",
    "SKIP_VALIDATION",
    "StaticRules",
    "ValidationPolicy",
    "validation_policy",
]


RuleType = Type[ASTValidationRule]

RulesFunction = Callable[[OperationParams], Collection[RuleType]]


def _check_rules(rules: Any) -> Tuple[RuleType, ...]:
    if not is_collection(rules):
        raise ConfigurationError(
            "Expected validation rules to be a collection"
            f" of validation rule classes, but got: {inspect(rules)}."
        )
    for rule in rules:
        if not (isinstance(rule, type) and issubclass(rule, ASTValidationRule)):
            raise ConfigurationError(
                f"Expected a validation rule class, but got: {inspect(rule)}."
            )
    return tuple(rules)


class ValidationPolicy:
    """Base class of all validation policies."""

    __slots__ = ()

    def rules_for(self, params: OperationParams) -> Tuple[RuleType, ...]:
        """Get the validation rules to run for the given operation.

        An empty tuple means that validation shall be skipped.
        """
        raise NotImplementedError


class DefaultRules(ValidationPolicy):
    """Run the validation rules defined by the GraphQL specification."""

    __slots__ = ()

    def rules_for(self, params: OperationParams) -> Tuple[RuleType, ...]:
        return tuple(specified_rules)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, DefaultRules)

    def __hash__(self) -> int:
        return hash(DefaultRules)


class StaticRules(ValidationPolicy):
    """Run the same fixed sequence of validation rules for every operation.

    An empty sequence of rules skips validation altogether.
    """

    rules: Tuple[RuleType, ...]

    __slots__ = ("rules",)

    def __init__(self, rules: Collection[RuleType]) -> None:
        self.rules = _check_rules(rules)

    def rules_for(self, params: OperationParams) -> Tuple[RuleType, ...]:
        return self.rules

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rules!r})"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, StaticRules) and other.rules == self.rules

    def __hash__(self) -> int:
        return hash(self.rules)


class DynamicRules(ValidationPolicy):
    """Decide about the validation rules for each operation separately.

    The function is called exactly once per operation with the parameters of the
    operation and must return a collection of validation rule classes, which may
    be empty in order to skip validation.
    """

    function: RulesFunction

    __slots__ = ("function",)

    def __init__(self, function: RulesFunction) -> None:
        self.function = function

    def rules_for(self, params: OperationParams) -> Tuple[RuleType, ...]:
        return _check_rules(self.function(params))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.function!r})"


SKIP_VALIDATION = StaticRules(())


def validation_policy(value: Any) -> ValidationPolicy:
    """Get the validation policy for the given configuration value.

    The value can be None (use the rules defined by the GraphQL specification),
    a validation policy, a collection of validation rule classes, or a function
    returning such a collection for the given operation parameters.
    """
    if value is None:
        return DefaultRules()
    if isinstance(value, ValidationPolicy):
        return value
    if is_collection(value):
        return StaticRules(value)
    if callable(value) and not isinstance(value, type):
        return DynamicRules(value)
    raise ConfigurationError(
        "Expected validation rules to be a collection of validation rule classes"
        f" or a function returning such a collection, but got: {inspect(value)}."
    )
