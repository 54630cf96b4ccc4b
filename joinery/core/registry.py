"""Rule registry: stores drawing rules and decides their run order."""

from __future__ import annotations

from joinery.models.context import DrawingContext
from joinery.models.parameters import EngineConfig
from joinery.rules.base import DrawingRule


class RuleRegistry:
    """
    Holds one rule per id.

    For a render the registry picks the enabled rules that apply to the
    window, orders them by priority and then moves any rule after the
    rules it depends on.
    """

    def __init__(self) -> None:
        self._rules: dict[str, DrawingRule] = {}

    def register(self, rule: DrawingRule) -> None:
        """Add a rule; a rule with the same id is replaced."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> DrawingRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[DrawingRule]:
        return list(self._rules.values())

    def get_applicable_rules(self, context: DrawingContext) -> list[DrawingRule]:
        selected = [
            rule for rule in self._rules.values()
            if self._is_enabled(rule.get_id(), context.config) and rule.applies(context)
        ]
        selected.sort(key=lambda rule: rule.priority)
        return self._dependency_order(selected)

    @staticmethod
    def _is_enabled(rule_id: str, config: EngineConfig) -> bool:
        if config.enabled_rules and rule_id not in config.enabled_rules:
            return False
        return rule_id not in config.disabled_rules

    def _dependency_order(self, rules: list[DrawingRule]) -> list[DrawingRule]:
        """
        Depth-first placement of dependencies ahead of dependants.

        Dependencies that were not selected for this render are skipped;
        a rule that (indirectly) depends on itself raises ValueError.
        """
        by_id = {rule.get_id(): rule for rule in rules}
        placed: list[DrawingRule] = []
        done: set[str] = set()
        in_progress: set[str] = set()

        def place(rule_id: str) -> None:
            if rule_id in done or rule_id not in by_id:
                return
            if rule_id in in_progress:
                raise ValueError(f"Circular rule dependency at {rule_id!r}")
            in_progress.add(rule_id)
            rule = by_id[rule_id]
            for dependency in rule.dependencies:
                place(dependency)
            in_progress.discard(rule_id)
            done.add(rule_id)
            placed.append(rule)

        for rule in rules:
            place(rule.get_id())
        return placed


def create_default_registry() -> RuleRegistry:
    """Registry loaded with every built-in drawing rule."""
    from joinery.rules.window.casement import CasementRule
    from joinery.rules.window.sliding import SlidingRule
    from joinery.rules.window.door import DoorRule
    from joinery.rules.glazing.georgian_bars import GeorgianBarsRule
    from joinery.rules.glazing.hinge_indicators import HingeIndicatorRule
    from joinery.rules.annotation.dimensions import DimensionRule, LabelRule

    registry = RuleRegistry()
    for rule in (
        CasementRule(), SlidingRule(), DoorRule(),
        GeorgianBarsRule(), HingeIndicatorRule(),
        DimensionRule(), LabelRule(),
    ):
        registry.register(rule)
    return registry
