from datetime import datetime

# Formats an optional timestamp for display, where an unset time is simply an empty cell.
def format_timestamp(value: datetime | None, fmt: str) -> str:
    if value is None:
        return ""
    return value.strftime(fmt)

# Parses user-entered text into a timestamp using the display format. Blank text means "not configured" and gives
# None, anything else that doesn't match the format raises ValueError.
def parse_timestamp(text: str, fmt: str) -> datetime | None:
    text = (text or "").strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        example = datetime(2024, 1, 31, 13, 45).strftime(fmt)
        raise ValueError(f"'{text}' isn't a valid time, expected something like '{example}'") from None
