def format_number(value: int) -> str:
    """Render an integer with comma thousands separators (1234567 -> "1,234,567")."""
    return f"{int(value):,}"


def iso_date(ts: str) -> str:
    """Leading calendar date of an ISO-8601 timestamp."""
    return (ts or "")[:10]
