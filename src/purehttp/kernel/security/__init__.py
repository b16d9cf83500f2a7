"""Kernel security – sensitive field names used for log redaction."""
from purehttp.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
