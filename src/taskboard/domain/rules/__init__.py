from src.taskboard.domain.rules.context import TaskRuleContext
from src.taskboard.domain.rules.rules import (
    ALL_RULES,
    COMPLEX_RULE,
    HOBBY_RULE,
    PERSONAL_RULE,
    SIMPLE_RULE,
    WORK_RULE,
    TaskRule,
)
from src.taskboard.domain.rules.selector import DEFAULT_RULE, RuleSelector, select_rule

__all__ = [
    "TaskRule",
    "TaskRuleContext",
    "RuleSelector",
    "select_rule",
    "DEFAULT_RULE",
    "ALL_RULES",
    "SIMPLE_RULE",
    "COMPLEX_RULE",
    "PERSONAL_RULE",
    "WORK_RULE",
    "HOBBY_RULE",
]
