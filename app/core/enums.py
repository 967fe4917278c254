from enum import Enum


class Gender(str, Enum):
    MALE = "H"
    FEMALE = "M"
