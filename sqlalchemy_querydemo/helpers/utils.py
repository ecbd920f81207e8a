from datetime import datetime

DATE_FORMAT = "%Y-%m-%d"


def like_pattern(keyword):
    """
    Wrap a keyword in ``%`` wildcards so a LIKE clause matches it as a substring.
    """
    return f"%{keyword}%"


def parse_date(value, fmt=DATE_FORMAT):
    # Raises ValueError on malformed input
    return datetime.strptime(value, fmt).date()
