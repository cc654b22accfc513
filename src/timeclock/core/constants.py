"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STARTING_EMPLOYEE_ID = 1

# 01/02/06 3:04PM
DATE_FORMAT = "%m/%d/%y"

SECONDS_PER_HOUR = 3600.0

APP_TITLE = "Employee Management System"
