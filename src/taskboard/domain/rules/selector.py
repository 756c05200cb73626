from __future__ import annotations

import logging
from typing import Any

from src.taskboard.domain.rules.rules import ALL_RULES, SIMPLE_RULE, TaskRule
from src.taskboard.domain.validation import normalize_task_type

logger = logging.getLogger(__name__)

DEFAULT_RULE: TaskRule = SIMPLE_RULE


class RuleSelector:
    """Lookup table from normalised type tag to transformation rule."""

    def __init__(self, default: TaskRule = DEFAULT_RULE) -> None:
        self._default = default
        self._rules: dict[str, TaskRule] = {rule.kind.value: rule for rule in ALL_RULES}

    @property
    def default(self) -> TaskRule:
        return self._default

    def select(self, task_type: Any) -> TaskRule:
        """Return the rule for ``task_type``. Never raises; unknown tags get the default."""
        rule = self._rules.get(normalize_task_type(task_type))
        if rule is None:
            logger.debug(
                "Unknown task type, using default rule",
                extra={"task_type": task_type, "rule": self._default.kind.value},
            )
            return self._default
        return rule


_selector = RuleSelector()


def select_rule(task_type: Any) -> TaskRule:
    return _selector.select(task_type)
