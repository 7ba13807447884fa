"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_KEY_FORMAT = "%Y-%m-%d"
DEFAULT_RECENT_ACTIVITY_LIMIT = 5

CLASSES = "classes"
STUDENTS = "students"
USERS = "users"
ROSTER = "students"
JOINED_CLASSES = "joinedClasses"
ATTENDANCE = "attendance"
