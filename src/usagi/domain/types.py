"""Domain types for Usagi."""
from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import CoreSchema, core_schema


class ItemText(str):
    """String subclass holding one trimmed, non-empty shopping list line."""

    def __new__(cls, value: str) -> 'ItemText':
        """Create a new ItemText instance with validation."""
        if not isinstance(value, str):
            raise TypeError('Item must be text')
        text = value.strip()
        if not text:
            raise ValueError('Item cannot be empty')
        if '\n' in text or '\r' in text:
            raise ValueError('Item must be a single line')
        return super().__new__(cls, text)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: Any
    ) -> CoreSchema:
        """Get Pydantic core schema for validation."""
        return core_schema.json_or_python_schema(
            json_schema=core_schema.str_schema(),
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(cls)
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(str)
        )


class ListEntry(BaseModel):
    """A list item together with its 1-based position."""
    position: int = Field(ge=1)
    text: ItemText

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return f"{self.position}. {self.text}"


class ParsedCommand(BaseModel):
    """A slash command split into its name and optional argument."""
    name: str
    argument: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class SessionState(str, Enum):
    """States of the conversation loop."""
    AWAITING_ITEM = "awaiting_item"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    FINISHED = "finished"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.FINISHED, SessionState.QUIT)
