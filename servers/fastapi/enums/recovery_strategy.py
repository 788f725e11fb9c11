from enum import Enum


class RecoveryStrategy(str, Enum):
    STRICT = "strict"
    UNWRAPPED = "unwrapped"
    EXTRACTED = "extracted"
    TRUNCATED = "truncated"
    EMPTY = "empty"
