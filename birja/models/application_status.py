from enum import Enum


class ApplicationStatus(str, Enum):
    NEW = 'new'
    REVIEWED = 'reviewed'
    CONTACTED = 'contacted'
    REJECTED = 'rejected'
    HIRED = 'hired'
