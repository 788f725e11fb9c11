from enum import Enum


class NoteImportance(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    NORMAL = "Normal"
