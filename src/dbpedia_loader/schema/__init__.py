from .enums import LanguageEnum
from .documents import Triple, FieldUpdate, DocumentUpdate

__all__ = [
    "LanguageEnum",
    "Triple",
    "FieldUpdate",
    "DocumentUpdate",
]
