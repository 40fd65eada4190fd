from .misc import format_timestamp, parse_timestamp

__all__ = ["format_timestamp", "parse_timestamp"]
