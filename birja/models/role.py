from enum import Enum


class RoleEnum(str, Enum):
    EMPLOYER = 'EMPLOYER'
