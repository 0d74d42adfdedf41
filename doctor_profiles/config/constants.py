from enum import Enum

class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

# Fallbacks used when a profile is provisioned from a user account
DEFAULT_SPECIALIZATION = "General Practitioner"
REGISTERED_SPECIALIZATION = "Medical Doctor ({reg})"
DEFAULT_HOSPITAL = "General Hospital"
DEFAULT_LOCATION = "Sri Lanka"
DEFAULT_EXPERIENCE = 1
DEFAULT_CONSULTATION_FEE = 2000

WEEKDAY_HOURS = ("08:00", "17:00")
SATURDAY_HOURS = ("08:00", "13:00")
