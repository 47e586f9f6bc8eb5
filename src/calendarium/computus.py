import calendar as stdlib_calendar
import datetime


class Date(datetime.date):
    """A date with whole-day arithmetic.  Adding or subtracting an integer or
    a timedelta moves by whole days; subtracting another date returns the
    number of days between them as an integer.
    """

    # pylint: disable=unused-argument
    def __init__(self, *args, **kwargs):
        super().__init__()
        self._day_of_week = self.isoweekday() % 7

    def __add__(self, days):
        if isinstance(days, datetime.timedelta):
            days = days.days
        base_result = super().__add__(datetime.timedelta(days=days))
        return Date(base_result.year, base_result.month, base_result.day)

    def __sub__(self, days_or_date):
        if isinstance(days_or_date, datetime.date):
            return super().__sub__(days_or_date).days
        if isinstance(days_or_date, datetime.timedelta):
            days_or_date = days_or_date.days
        return self + (-days_or_date)

    @classmethod
    def coerce(cls, date):
        if isinstance(date, cls):
            return date
        return cls(date.year, date.month, date.day)

    @property
    def day_of_week(self):
        """Returns the index of the day of the week, starting from Sunday at
        zero.
        """
        return self._day_of_week

    def next_sunday(self):
        """Returns the first Sunday strictly after this date."""
        return self + (7 - self.day_of_week)

    def sunday_on_or_before(self):
        return self - self.day_of_week


def check_year(year):
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        raise ValueError("Year %r outside the supported range %d-%d" %
                         (year, datetime.MINYEAR, datetime.MAXYEAR))


# pylint: disable=invalid-name,too-many-locals
def easter_sunday(year):
    """Returns the date of Easter Sunday in the Gregorian calendar,
    calculated using the Butcher-Meeus algorithm.  Only integer arithmetic is
    involved, and the proleptic Gregorian calendar is assumed for early years.
    """
    check_year(year)
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, p = divmod(h + l - 7 * m + 114, 31)
    day = p + 1
    assert month in (3, 4), month
    assert day <= stdlib_calendar.monthrange(year, month)[1], (day, month)
    easter = Date(year, month, day)
    assert Date(year, 3, 22) <= easter <= Date(year, 4, 25), easter
    return easter


# First Sunday of Advent, keyed by the day of the week of Christmas (Sunday at
# zero).
ADVENT_SUNDAYS = {
    0: (11, 27),
    1: (12, 3),
    2: (12, 2),
    3: (12, 1),
    4: (11, 30),
    5: (11, 29),
    6: (11, 28),
}


def advent_sunday(year):
    """Returns the date of the first Sunday of Advent for the specified
    year.
    """
    check_year(year)
    christmas = Date(year, 12, 25)
    month, day = ADVENT_SUNDAYS[christmas.day_of_week]
    return Date(year, month, day)
