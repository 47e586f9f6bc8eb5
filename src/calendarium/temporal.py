"""Generators for the temporal cycle.

Each generator takes the ``Anchors`` of a year and lazily yields the
``Celebration`` entries of one block of the liturgical year.  Generators
depend only on the anchors, never on one another's output.
"""

from .celebration import Celebration, Code, Color, Rank, Season
from .computus import Date


def days(start, end):
    """Yields the dates from start up to but not including end."""
    current = start
    while current < end:
        yield current
        current += 1


def sundays(start, end):
    return (date for date in days(start, end) if date.day_of_week == 0)


def weekdays(start, end):
    return (date for date in days(start, end) if date.day_of_week != 0)


# Advent.

def advent_sundays(anchors):
    for week in range(1, 5):
        date = anchors.first_sunday_of_advent + 7 * (week - 1)
        color = Color.ROSE if week == 3 else Color.VIOLET
        yield Celebration(week, date, Code(Season.ADVENT, week, 0),
                          Rank.SOLEMN, color)


def advent_weekdays(anchors):
    start = anchors.first_sunday_of_advent + 1
    for (n, date) in enumerate(weekdays(start, anchors.christmas), 1):
        # The last days before Christmas have their own proper.
        qualifier = 'major' if date.day >= 17 else None
        code = Code(Season.ADVENT, anchors.advent_week(date), date.day_of_week,
                    qualifier)
        yield Celebration(n, date, code, Rank.FERIAL, Color.VIOLET)


# Christmastide.

def nativity(anchors):
    date = anchors.christmas
    code = Code(Season.CHRISTMAS, anchors.christmas_week(date),
                date.day_of_week, 'nativity')
    yield Celebration(1, date, code, Rank.SOLEMN, Color.WHITE)


def holy_family(anchors):
    date = anchors.holy_family
    code = Code(Season.CHRISTMAS, anchors.christmas_week(date),
                date.day_of_week, 'holy-family')
    yield Celebration(1, date, code, Rank.SOLEMN, Color.WHITE)


def christmas_octave(anchors):
    # Only the days that fall within this civil year.
    octave_days = (Date(anchors.year, 12, day) for day in range(26, 32))
    octave_days = (date for date in octave_days
                   if date != anchors.holy_family)
    for (n, date) in enumerate(octave_days, 2):
        code = Code(Season.CHRISTMAS, anchors.christmas_week(date),
                    date.day_of_week, 'octave')
        yield Celebration(n, date, code, Rank.FERIAL, Color.WHITE)


def christmas_weekdays(anchors):
    """Days of Christmastide in January, other than the solemnities, up to the
    Baptism of the Lord.
    """
    start = Date(anchors.year, 1, 2)
    dates = (date for date in days(start, anchors.baptism_of_the_lord)
             if date != anchors.epiphany)
    for (n, date) in enumerate(dates, 1):
        week = anchors.christmas_week(date)
        if date.day_of_week == 0:
            code = Code(Season.CHRISTMAS, week, 0)
            rank = Rank.SOLEMN
        else:
            qualifier = ('before-epiphany' if date < anchors.epiphany
                         else 'after-epiphany')
            code = Code(Season.CHRISTMAS, week, date.day_of_week, qualifier)
            rank = Rank.FERIAL
        yield Celebration(n, date, code, rank, Color.WHITE)


def epiphany(anchors):
    date = anchors.epiphany
    code = Code(Season.CHRISTMAS, anchors.christmas_week(date),
                date.day_of_week, 'epiphany')
    yield Celebration(1, date, code, Rank.SOLEMN, Color.WHITE)


def baptism_of_the_lord(anchors):
    date = anchors.baptism_of_the_lord
    code = Code(Season.CHRISTMAS, anchors.christmas_week(date),
                date.day_of_week, 'baptism')
    yield Celebration(1, date, code, Rank.SOLEMN, Color.WHITE)


# Lent and Holy Week.

def ash_wednesday_week(anchors):
    start = anchors.ash_wednesday
    for (n, date) in enumerate(days(start, start + 4), 1):
        qualifier = 'ash-wednesday' if date == start else None
        code = Code(Season.LENT, 0, date.day_of_week, qualifier)
        yield Celebration(n, date, code, Rank.FERIAL, Color.VIOLET)


def lent_sundays(anchors):
    dates = sundays(anchors.ash_wednesday, anchors.palm_sunday)
    for (week, date) in enumerate(dates, 1):
        color = Color.ROSE if week == 4 else Color.VIOLET
        yield Celebration(week, date, Code(Season.LENT, week, 0),
                          Rank.SOLEMN, color)


def lent_weekdays(anchors):
    week = 1
    dates = weekdays(anchors.ash_wednesday + 5, anchors.palm_sunday)
    for (n, date) in enumerate(dates, 1):
        yield Celebration(n, date, Code(Season.LENT, week, date.day_of_week),
                          Rank.FERIAL, Color.VIOLET)
        if date.day_of_week == 6:
            week += 1


def holy_week(anchors):
    start = anchors.palm_sunday
    week = anchors.lent_week(start)
    yield Celebration(1, start, Code(Season.LENT, week, 0, 'palm-sunday'),
                      Rank.SOLEMN, Color.RED)
    for (n, date) in enumerate(days(start + 1, anchors.holy_thursday), 2):
        yield Celebration(n, date, Code(Season.LENT, week, date.day_of_week),
                          Rank.FERIAL, Color.VIOLET)


def triduum(anchors):
    # The Triduum continues the count of Holy Week.
    week = anchors.lent_week(anchors.holy_thursday)
    days_of_triduum = [
        (anchors.holy_thursday, 'holy-thursday', Color.WHITE),
        (anchors.good_friday, 'good-friday', Color.RED),
        (anchors.holy_saturday, 'holy-saturday', Color.VIOLET),
    ]
    for (n, (date, qualifier, color)) in enumerate(days_of_triduum, 1):
        code = Code(Season.TRIDUUM, week, date.day_of_week, qualifier)
        yield Celebration(n, date, code, Rank.SOLEMN, color)
    yield Celebration(4, anchors.easter,
                      Code(Season.EASTER, 1, 0, 'resurrection'),
                      Rank.SOLEMN, Color.WHITE)


# Eastertide.

def easter_octave(anchors):
    # Monday to Saturday; the octave day is the second Sunday of Easter.
    start = anchors.easter + 1
    for (n, date) in enumerate(days(start, anchors.second_sunday_of_easter), 1):
        code = Code(Season.EASTER, 1, date.day_of_week, 'octave')
        yield Celebration(n, date, code, Rank.SOLEMN, Color.WHITE)


def easter_sundays(anchors):
    dates = sundays(anchors.second_sunday_of_easter, anchors.pentecost + 1)
    for (week, date) in enumerate(dates, 2):
        if date == anchors.pentecost:
            code = Code(Season.EASTER, week, 0, 'pentecost')
            color = Color.RED
        else:
            code = Code(Season.EASTER, week, 0)
            color = Color.WHITE
        yield Celebration(week, date, code, Rank.SOLEMN, color)


def easter_weekdays(anchors):
    week = 2
    dates = weekdays(anchors.second_sunday_of_easter, anchors.pentecost)
    for (n, date) in enumerate(dates, 1):
        yield Celebration(n, date, Code(Season.EASTER, week, date.day_of_week),
                          Rank.FERIAL, Color.WHITE)
        if date.day_of_week == 6:
            week += 1


# Ordinary Time.

def early_ordinary_sundays(anchors):
    # The Baptism of the Lord stands in place of the first Sunday.
    start = anchors.baptism_of_the_lord + 1
    dates = sundays(start, anchors.ash_wednesday)
    for (week, date) in enumerate(dates, 2):
        yield Celebration(week, date, Code(Season.ORDINARY, week, 0),
                          Rank.SOLEMN, Color.GREEN)


def early_ordinary_weekdays(anchors):
    week = 1
    start = anchors.baptism_of_the_lord + 1
    for (n, date) in enumerate(weekdays(start, anchors.ash_wednesday), 1):
        yield Celebration(n, date,
                          Code(Season.ORDINARY, week, date.day_of_week),
                          Rank.FERIAL, Color.GREEN)
        if date.day_of_week == 6:
            week += 1


def late_ordinary_sundays(anchors):
    """Sundays between Corpus Christi and Christ the King, numbered backwards
    from the thirty-fourth week and yielded in calendar order.
    """
    week = 34
    dates = []
    sunday = anchors.christ_the_king - 7
    while sunday > anchors.corpus_christi:
        week -= 1
        dates.append((week, sunday))
        sunday -= 7
    for (n, (week, date)) in enumerate(reversed(dates), 1):
        yield Celebration(n, date, Code(Season.ORDINARY, week, 0),
                          Rank.SOLEMN, Color.GREEN)


def late_ordinary_weekdays(anchors):
    """Weekdays from the Monday after Pentecost to the eve of Advent.  The
    week count runs backwards from the thirty-fourth week, dropping on each
    Monday.
    """
    week = 34
    dates = []
    current = anchors.first_sunday_of_advent - 1
    while current > anchors.pentecost:
        if current.day_of_week != 0:
            dates.append((week, current))
        if current.day_of_week == 1:
            week -= 1
        current -= 1
    for (n, (week, date)) in enumerate(reversed(dates), 1):
        yield Celebration(n, date,
                          Code(Season.ORDINARY, week, date.day_of_week),
                          Rank.FERIAL, Color.GREEN)
