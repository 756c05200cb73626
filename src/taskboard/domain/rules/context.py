from __future__ import annotations

from typing import Any

from src.taskboard.domain.models.task_data import TaskData
from src.taskboard.domain.rules.rules import TaskRule
from src.taskboard.domain.rules.selector import select_rule


class TaskRuleContext:
    """Holds the selected rule and runs it."""

    def __init__(self, rule: TaskRule) -> None:
        self._rule = rule

    @classmethod
    def for_type(cls, task_type: Any) -> TaskRuleContext:
        return cls(select_rule(task_type))

    @property
    def rule(self) -> TaskRule:
        return self._rule

    def transform(self, task_data: TaskData) -> TaskData:
        return self._rule.apply(task_data)
