"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_CATEGORY_NAME_LENGTH = 100
MAX_CAPTION_LENGTH = 2000
MAX_OBJECT_KEY_LENGTH = 255
MAX_FILE_NAME_LENGTH = 255
MAX_MIME_TYPE_LENGTH = 127
MAX_URL_LENGTH = 2048

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Object storage
SIGNED_URL_TTL_SECONDS = 300  # 5 minutes
OBJECT_KEY_RANDOM_RANGE = 10**9

# Grant defaults applied when a grant is first created
DEFAULT_CAN_VIEW = True
DEFAULT_CAN_EDIT = False
DEFAULT_CAN_DELETE = False

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
