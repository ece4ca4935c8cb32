"""Domain models for transaction categories."""

from dataclasses import dataclass, field
from enum import Enum
import uuid


class CategoryType(str, Enum):
    """Whether a category groups income or expenses."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Category:
    """Reference data used to group and filter transactions."""

    name: str
    type: CategoryType
    icon_name: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


__all__ = ["CategoryType", "Category"]
