"""Application services."""

from prettiest.application.services.rule_engine import InspectorVisitor, RuleEngine

__all__ = [
    "InspectorVisitor",
    "RuleEngine",
]
