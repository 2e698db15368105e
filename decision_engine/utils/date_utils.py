"""Date manipulation utilities"""

from datetime import date


def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end.

    A trailing partial month is dropped: 2000-01-15 to 2000-03-14 is 1 month,
    to 2000-03-15 is 2 months.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if months > 0 and end.day < start.day:
        months -= 1
    elif months < 0 and end.day > start.day:
        months += 1
    return months
