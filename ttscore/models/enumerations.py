from enum import Enum


class Band(str, Enum):
    """Ordinal classification of a 0-30 score. Values double as i18n keys."""
    BELOW_AVERAGE = "below_average"  # 0-11
    FAIR = "fair"                    # 12-17
    GOOD = "good"                    # 18-23
    EXCELLENT = "excellent"          # 24-30
    INVALID = "invalid"              # outside [0, 30]


class GroupKey(str, Enum):
    MOVEMENT = "movement"  # stroke/movement technique items
    OUTCOME = "outcome"    # result/accuracy items


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Locale(str, Enum):
    ID = "id"
    EN = "en"


class MessageTone(str, Enum):
    AFFIRMATIVE = "affirmative"
    ENCOURAGING = "encouraging"


class ExportErrorKind(str, Enum):
    RENDER_FAILURE = "render_failure"
    CAPTURE_FAILURE = "capture_failure"
    ASSEMBLY_FAILURE = "assembly_failure"
