"""Request builders and response types for static maps, time zones, place types and field masks."""

__version__ = "0.1.0"

__all__ = ["fieldmasks", "placetypes", "staticmap", "timezone", "transport", "types"]