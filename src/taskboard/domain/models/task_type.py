from enum import Enum


class TaskType(str, Enum):
    SIMPLE = "simple"
    COMPLEX = "complex"
    PERSONAL = "personal"
    WORK = "work"
    HOBBY = "hobby"
