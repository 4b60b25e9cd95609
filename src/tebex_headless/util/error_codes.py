# Validation errors (1000-1999)
UNKNOWN_APPLY_TYPE = 1001
APPLY_BODY_MISMATCH = 1002
INVALID_APPLY_BODY = 1003

# Configuration errors (7000-7999)
INVALID_TIMEOUT_CONFIG = 7001
