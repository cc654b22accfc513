import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
# Empty means log to the Textual devtools console instead of a file.
LOG_FILE = os.getenv("LOG_FILE", "")
