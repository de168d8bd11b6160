"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LEAVE_ALLOWANCE = 12
DEFAULT_SALARY = 50000.0
DEFAULT_STORE_TIMEOUT = 10.0

ABSENT_MARKER = "-"
SESSION_KEY = "currentUser"
EMPLOYEE_CODE_PREFIX = "EMP"

AVATAR_URL_TEMPLATE = "https://ui-avatars.com/api/?name={name}&background=random&color=fff"
