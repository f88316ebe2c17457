"""Default error messages and fixed patterns used by the schema rules.

Messages containing ``{0}`` are formatted with the configured bound.
"""

import re

# Schema
REQUIRED = "This field is required"
VALIDATE_FUNCTION = "Value did not pass the custom validation"

# Sequence
SEQUENCE_MIN = "Length must be at least {0}"
SEQUENCE_MAX = "Length must be at most {0}"
SEQUENCE_LENGTH = "Length must be exactly {0}"
SEQUENCE_REQUIRED = "Value must not be empty"

# String
STRING_TYPE = "Value must be a string"
STRING_MATCH = "Value must match pattern {0}"
STRING_EMAIL = "Value must be a valid email address"
STRING_PHONE = "Value must be a valid phone number"
STRING_REQUIRED = "Value must be a non-empty string"

# Number
NUMBER_TYPE = "Value must be a number"
NUMBER_MIN = "Value must be greater than or equal to {0}"
NUMBER_MAX = "Value must be less than or equal to {0}"
NUMBER_POSITIVE = "Value must be positive"
NUMBER_NEGATIVE = "Value must be negative"
NUMBER_INTEGER = "Value must be an integer"

# Boolean
BOOLEAN_TYPE = "Value must be a boolean"

# Date
DATE_TYPE = "Value must be a date"
DATE_MIN = "Date must not be earlier than {0}"
DATE_MAX = "Date must not be later than {0}"

# Array
ARRAY_TYPE = "Value must be an array"
ARRAY_CONTAIN = "Array must contain {0}"

# Object
OBJECT_TYPE = "Value must be an object"

# Select
SELECT_TYPE = "Value must be an option with a label and a value"
SELECT_OPTIONS = "Value must be one of the available options"

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)
PHONE_PATTERN = re.compile(
    r"^\+?(?:[0-9]{1,3}[-. ]?)?\(?[0-9]{3}\)?[-. ]?[0-9]{3}[-. ]?[0-9]{2}[-. ]?[0-9]{2}$"
)
