from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .enums import LanguageEnum


@dataclass(frozen=True)
class Triple:
    """One subject/predicate/object record parsed from a single dump line.

    ``None`` means the field could not be located; ``""`` means it was
    present but empty.
    """
    subject: str
    predicate: Optional[str] = None
    object: Optional[str] = None


class FieldUpdate(BaseModel):
    name: str
    value: str
    boost: float = 1.0


class DocumentUpdate(BaseModel):
    """A document as accepted by the OpenSearchServer update API."""
    lang: LanguageEnum = LanguageEnum.UNDEFINED
    fields: List[FieldUpdate] = Field(default_factory=list)

    def add_field(self, name: str, value: str, boost: float = 1.0) -> "DocumentUpdate":
        self.fields.append(FieldUpdate(name=name, value=value, boost=boost))
        return self

    def get_value(self, name: str) -> Optional[str]:
        """Value of the first field called ``name``, if any."""
        for field in self.fields:
            if field.name == name:
                return field.value
        return None

    def to_json(self) -> Dict[str, Any]:
        # The API expects the enum constant name ("ENGLISH"), not the code
        return {
            "lang": self.lang.name,
            "fields": [field.model_dump() for field in self.fields],
        }
