import enum


class JobType(str, enum.Enum):
    INSTALLATION = "INSTALLATION"
    BATTERY_SETUP = "BATTERY_SETUP"
    MAINTENANCE = "MAINTENANCE"
    REPAIR = "REPAIR"
    INSPECTION = "INSPECTION"
    UPGRADE = "UPGRADE"


class JobStatus(str, enum.Enum):
    PENDING = "PENDING"
    MATCHED = "MATCHED"
    QUOTED = "QUOTED"
    ASSIGNED = "ASSIGNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class MatchStatus(str, enum.Enum):
    SUGGESTED = "SUGGESTED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    WITHDRAWN = "WITHDRAWN"
