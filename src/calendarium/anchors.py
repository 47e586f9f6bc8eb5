"""Pivot dates from which every block of the liturgical year is derived.

The functions here are pure: the movable dates take the date of Easter, the
fixed-cycle dates take the year, and those that depend on a regional variant
take the options as well.  ``Anchors`` gathers all of them for one year.
"""

from .computus import Date, advent_sunday, check_year, easter_sunday
from .options import Options


def holy_thursday(easter):
    return easter - 3


def ash_wednesday(easter):
    return easter - 46


def first_sunday_of_lent(easter):
    return ash_wednesday(easter) + 4


def fifth_sunday_of_lent(easter):
    return first_sunday_of_lent(easter) + 4 * 7


def palm_sunday(easter):
    return easter - 7


def pentecost(easter):
    return easter + 49


def trinity_sunday(easter):
    return easter + 8 * 7


def ascension(easter, options):
    # Forty days after Easter, unless transferred to the following Sunday.
    if options.ascension_original:
        return easter + 39
    return easter + 42


def corpus_christi(easter, options):
    # The Thursday after Trinity Sunday, unless transferred to the following
    # Sunday.
    if options.corpus_original:
        return easter + 60
    return easter + 63


def first_sunday_of_advent(year):
    return advent_sunday(year)


def christ_the_king(year):
    return first_sunday_of_advent(year) - 7


def christmas(year):
    return Date(year, 12, 25)


def holy_family(year):
    # The Sunday within the octave of Christmas, or 30 December when there is
    # none.
    nativity = christmas(year)
    if nativity.day_of_week == 0:
        return Date(year, 12, 30)
    return nativity.next_sunday()


def epiphany(year, options):
    if not options.epiphany_on_sunday:
        return Date(year, 1, 6)
    second = Date(year, 1, 2)
    if second.day_of_week == 0:
        return second
    return second.next_sunday()


def baptism_of_the_lord(year, options):
    if not options.epiphany_on_sunday:
        # When 7 or 8 January is a Sunday, the feast is kept on the following
        # Monday.
        for day in (7, 8):
            sunday = Date(year, 1, day)
            if sunday.day_of_week == 0:
                return sunday + 1
    return epiphany(year, options).next_sunday()


class Anchors:
    """Immutable context holding the pivot dates of one civil year, shared
    read-only by every season generator.
    """

    def __init__(self, year, options=None):
        check_year(year)
        options = Options.coerce(options)
        easter = easter_sunday(year)

        self.year = year
        self.options = options
        self.easter = easter

        self.ash_wednesday = ash_wednesday(easter)
        self.first_sunday_of_lent = first_sunday_of_lent(easter)
        self.fifth_sunday_of_lent = fifth_sunday_of_lent(easter)
        self.palm_sunday = palm_sunday(easter)
        self.holy_thursday = holy_thursday(easter)
        self.good_friday = easter - 2
        self.holy_saturday = easter - 1
        self.second_sunday_of_easter = easter + 7
        self.ascension = ascension(easter, options)
        self.pentecost = pentecost(easter)
        self.trinity_sunday = trinity_sunday(easter)
        self.corpus_christi = corpus_christi(easter, options)

        self.epiphany = epiphany(year, options)
        self.baptism_of_the_lord = baptism_of_the_lord(year, options)
        self.christ_the_king = christ_the_king(year)
        self.first_sunday_of_advent = first_sunday_of_advent(year)
        self.christmas = christmas(year)
        self.holy_family = holy_family(year)

        assert self.christ_the_king.day_of_week == 0, self.christ_the_king

    def __repr__(self):
        return "Anchors(%d, %r)" % (self.year, self.options)

    def lent_week(self, date):
        """Returns the week of Lent of the specified date, counting the days
        from Ash Wednesday to the first Sunday as week zero.
        """
        if date < self.first_sunday_of_lent:
            return 0
        return (date - self.first_sunday_of_lent) // 7 + 1

    def easter_week(self, date):
        return (date - self.easter) // 7 + 1

    def advent_week(self, date):
        return (date - self.first_sunday_of_advent) // 7 + 1

    def late_ordinary_week(self, date):
        """Returns the week of Ordinary Time after Pentecost, counting
        backwards from Christ the King in the thirty-fourth week.
        """
        weeks_before = (self.christ_the_king - date.sunday_on_or_before()) // 7
        return 34 - weeks_before

    def christmas_week(self, date):
        """Returns the week of Christmastide.  The first week runs from
        Christmas Day to the Saturday after the first Sunday on or after it,
        and later weeks begin on Sundays.
        """
        if date.month == 12:
            first_sunday = self.christmas
            if first_sunday.day_of_week != 0:
                first_sunday = first_sunday.next_sunday()
            if date < first_sunday:
                return 1
            return (date - first_sunday) // 7 + 1

        # Christmas of the previous year fell on the same day of the week as 1
        # January, one week earlier.
        new_year = Date(self.year, 1, 1)
        to_first_sunday = (7 - new_year.day_of_week) % 7
        return ((date - new_year) + 7 - to_first_sunday) // 7 + 1
