"""Generated SQL statement model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field as PydanticField


class Statement(BaseModel):
    """SQL text with its positional arguments.

    Arguments are in placeholder order. An empty statement means
    "nothing to execute" and must not be sent to a database.

    Examples:
        >>> stmt = Statement(sql="DELETE FROM books;")
        >>> stmt.args
        ()
    """

    sql: str = PydanticField(
        "",
        description="SQL text in the target dialect",
    )

    args: tuple[Any, ...] = PydanticField(
        default_factory=tuple,
        description="Bound values in placeholder order",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def is_empty(self) -> bool:
        """Whether there is nothing to execute."""
        return not self.sql.strip()

    @classmethod
    def empty(cls) -> Statement:
        """Create an empty statement."""
        return cls()
