"""User-facing notification texts returned alongside API results."""

LOGIN_SUCCESS = "Login time recorded: {time}"
LOGOUT_SUCCESS = "Logout time recorded: {time}"
NOTHING_TO_CLOSE = "No open session for today"
TIME_UPDATED = "Log entry has been updated successfully."
DATA_RESET = "All time logs have been cleared successfully."
RESET_NOT_CONFIRMED = "Reset was not confirmed; nothing was deleted."

INVALID_TIME_FORMAT = "Please use format like '9:00 AM' or '5:30 PM'"
INVALID_DATE = "Log date is invalid or outside acceptable range"
LOGOUT_BEFORE_LOGIN = "Logout time cannot be earlier than login time"
RECORD_NOT_FOUND = "Log entry does not exist"

DATA_INTEGRITY_WARNING = "Some data may have been corrupted. Please verify your time logs."
SAVE_ERROR = "Failed to save time logs. Please try again."
