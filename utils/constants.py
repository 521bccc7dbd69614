"""Utilities Constants
- Centralized names and defaults used by the screen, services and tests.
"""

# Resource
RESOURCE_NAME = "code.txt"   # relative to the app directory
DEFAULT_ENCODING = "utf-8"

# Page elements
DISPLAY_KEY = "code"
SAVE_KEY = "save-code"

# Save
SAVE_TITLE = "COVID-19 Machine Learning Detection"
SAVE_EXTENSION = "txt"
SAVE_MIME = "text/plain"
LINE_ENDING = "\n"

# Artifacts / logs
ARTIFACTS_DIR = "artifacts"  # relative to cwd
EVENT_LOG_NAME = "code_viewer_log.jsonl"

# Session state
PRESENTER_KEY = "code_viewer_presenter"
