from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class JoinMethod:
    """
    describes how stringified items are glued together.
    `final` joins the last two items when non-empty, otherwise `between` is used.
    """
    between: str
    final: str = ""

    @property
    def last_separator(self) -> str:
        return self.final if self.final else self.between


# "1, 2, 3"
COMMA_SEPARATED = JoinMethod(between=", ")

# "1, 2 and 3"
LIST_JOIN = JoinMethod(between=", ", final=" and ")


def join_values(values: Iterable, method: JoinMethod = COMMA_SEPARATED) -> str:
    """stringify every value and join using the method's separators"""
    parts: List[str] = [str(v) for v in values]
    if len(parts) < 2:
        return "".join(parts)
    return method.between.join(parts[:-1]) + method.last_separator + parts[-1]
