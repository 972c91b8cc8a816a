# src/rfc822_like/observability/names.py

"""Standard metric names for rfc822-like observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Scanner Metrics
# ============================================================================

# Duration (one sample per fully consumed input; time suspended at a yield,
# i.e. spent by the consumer, is not counted)
SCAN_DURATION = "rfc822_scan_duration"

# Counters
RECORDS_TOTAL = "rfc822_records_total"
PARSE_ERRORS_TOTAL = "rfc822_parse_errors_total"


# ============================================================================
# Binding Metrics
# ============================================================================

# Duration (one sample per deserialize call; for sequence targets this
# includes scanning the records being bound)
BINDING_DURATION = "rfc822_binding_duration"

# Counters
BINDING_ERRORS_TOTAL = "rfc822_binding_errors_total"
