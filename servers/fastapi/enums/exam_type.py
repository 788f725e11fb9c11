from enum import Enum


class ExamType(str, Enum):
    VARSITY = "varsity"
    CKRUET = "ckruet"
    BUET = "buet"
