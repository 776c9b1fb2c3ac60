"""
Configuration constants for the exiftool adapter.
"""

# --- External Tool ---
EXIFTOOL_NAME = "exiftool"

# Encoding of the tool's stdout. Undecodable bytes are replaced, not fatal.
OUTPUT_ENCODING = "utf-8"
OUTPUT_ERRORS = "replace"

# --- Well-known Fields (exiftool's own labels) ---
LENS_FIELD = "Lens ID"
CAMERA_FIELD = "Camera Model Name"
GPS_FIELD = "GPS Position"

# Capture timestamp, in priority order
DATE_FIELDS = [
    "Date/Time Original",
    "Create Date",
    "Modify Date",
]

# Tried in order of decreasing precision; first one that parses wins
DATE_FORMATS = [
    "%Y:%m:%d %H:%M:%S",
    "%Y:%m:%d %H:%M:%S.%f",
    "%Y:%m:%d %H:%M:%S.%f%z",
]

# --- Reporting ---
CSV_HEADERS = [
    "Path",
    "Camera",
    "Lens",
    "Capture Date",
    "Geotagged",
]
