import pytest

from src.taskboard.domain.models import TaskData, TaskPriority
from src.taskboard.domain.rules import (
    ALL_RULES,
    COMPLEX_RULE,
    HOBBY_RULE,
    PERSONAL_RULE,
    SIMPLE_RULE,
    WORK_RULE,
    TaskRuleContext,
)

ALL_PRIORITIES = list(TaskPriority)


@pytest.mark.parametrize(
    ("rule", "expected_title"),
    [
        (SIMPLE_RULE, "Simple: Test Task"),
        (COMPLEX_RULE, "Complex: Test Task"),
        (PERSONAL_RULE, "[Personal] Test Task"),
        (WORK_RULE, "[Work] Test Task"),
        (HOBBY_RULE, "[Hobby] Test Task"),
    ],
)
def test_rule_prefixes_title(rule, expected_title, task_data: TaskData) -> None:
    result = rule.apply(task_data)

    assert result.title == expected_title
    assert result.description == task_data.description
    assert result.type == task_data.type


@pytest.mark.parametrize("rule", ALL_RULES)
def test_rule_returns_new_value_and_leaves_input_alone(rule, task_data: TaskData) -> None:
    before = task_data.model_dump()

    result = rule.apply(task_data)

    assert result is not task_data
    assert task_data.model_dump() == before


@pytest.mark.parametrize("rule", ALL_RULES)
def test_rule_with_empty_title_yields_bare_prefix(rule) -> None:
    data = TaskData(title="", description="", priority=TaskPriority.HIGH, type="x")

    assert rule.apply(data).title == rule.title_prefix


@pytest.mark.parametrize("rule", [SIMPLE_RULE, PERSONAL_RULE])
@pytest.mark.parametrize("priority", ALL_PRIORITIES)
def test_rules_without_priority_adjustment_keep_priority(rule, priority) -> None:
    data = TaskData(title="Call mom", priority=priority, type="personal")

    assert rule.apply(data).priority == priority


@pytest.mark.parametrize("rule", [COMPLEX_RULE, WORK_RULE])
@pytest.mark.parametrize(
    ("priority", "expected"),
    [
        (TaskPriority.LOW, TaskPriority.NORMAL),
        (TaskPriority.NORMAL, TaskPriority.NORMAL),
        (TaskPriority.HIGH, TaskPriority.HIGH),
        (TaskPriority.URGENT, TaskPriority.URGENT),
    ],
)
def test_elevating_rules_raise_only_low_priority(rule, priority, expected) -> None:
    data = TaskData(title="Check emails", priority=priority, type="work")

    assert rule.apply(data).priority == expected


@pytest.mark.parametrize("priority", ALL_PRIORITIES)
def test_hobby_rule_forces_low_priority(priority) -> None:
    data = TaskData(title="Paint", priority=priority, type="hobby")

    assert HOBBY_RULE.apply(data).priority == TaskPriority.LOW


def test_work_example() -> None:
    data = TaskData(title="X", priority="low", type="work")

    result = TaskRuleContext.for_type(data.type).transform(data)

    assert result.title == "[Work] X"
    assert result.priority == TaskPriority.NORMAL
    assert result.type == "work"


def test_hobby_example_with_empty_title() -> None:
    data = TaskData(title="", priority="urgent", type="hobby")

    result = TaskRuleContext.for_type(data.type).transform(data)

    assert result.title == "[Hobby] "
    assert result.priority == TaskPriority.LOW
    assert result.type == "hobby"


def test_title_keeps_special_characters() -> None:
    data = TaskData(title="Review & approve budget (2024)", priority="high", type="work")

    assert WORK_RULE.apply(data).title == "[Work] Review & approve budget (2024)"


def test_context_delegates_to_held_rule(task_data: TaskData) -> None:
    context = TaskRuleContext(COMPLEX_RULE)

    assert context.rule is COMPLEX_RULE
    assert context.transform(task_data) == COMPLEX_RULE.apply(task_data)


def test_task_data_is_immutable(task_data: TaskData) -> None:
    with pytest.raises(ValueError):
        task_data.title = "changed"  # type: ignore[misc]
