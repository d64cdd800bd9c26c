import enum


class Priority(str, enum.Enum):
    NONE = "None"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Status(str, enum.Enum):
    NONE = "None"
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    DONE = "Done"
