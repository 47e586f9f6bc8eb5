"""Solemnities that are emitted individually, each applying at most one rule
of displacement.
"""

from .celebration import Celebration, Code, Color, Rank, Season
from .computus import Date


def _solemnity(date, season, week, qualifier, color=Color.WHITE):
    code = Code(season, week, date.day_of_week, qualifier)
    return Celebration(1, date, code, Rank.SOLEMN, color)


def _is_lenten_sunday(anchors, date):
    return (date.day_of_week == 0 and
            anchors.first_sunday_of_lent <= date <= anchors.fifth_sunday_of_lent)


def mary_mother_of_god(anchors):
    # The octave day of Christmas.
    date = Date(anchors.year, 1, 1)
    yield _solemnity(date, Season.CHRISTMAS, anchors.christmas_week(date),
                     'mary-mother-of-god')


def joseph(anchors):
    date = Date(anchors.year, 3, 19)
    if _is_lenten_sunday(anchors, date):
        date += 1
    elif anchors.palm_sunday <= date <= anchors.easter:
        # Anticipated to the Saturday before Palm Sunday.
        date = anchors.palm_sunday - 1
    yield _solemnity(date, Season.SANCTORAL, 0, 'joseph')


def annunciation(anchors):
    date = Date(anchors.year, 3, 25)
    if anchors.palm_sunday <= date <= anchors.second_sunday_of_easter:
        # Transferred out of Holy Week and the Easter octave to the Monday
        # after the second Sunday of Easter.
        date = anchors.second_sunday_of_easter + 1
    elif _is_lenten_sunday(anchors, date):
        date += 1
    yield _solemnity(date, Season.SANCTORAL, 0, 'annunciation')


def immaculate_conception(anchors):
    date = Date(anchors.year, 12, 8)
    if (date.day_of_week == 0 and date >= anchors.first_sunday_of_advent and
            not anchors.options.immaculate_prevails):
        date += 1
    yield _solemnity(date, Season.SANCTORAL, 0, 'immaculate-conception')


def ascension(anchors):
    date = anchors.ascension
    yield _solemnity(date, Season.EASTER, anchors.easter_week(date),
                     'ascension')


def trinity_sunday(anchors):
    date = anchors.trinity_sunday
    yield _solemnity(date, Season.ORDINARY, anchors.late_ordinary_week(date),
                     'trinity')


def corpus_christi(anchors):
    date = anchors.corpus_christi
    yield _solemnity(date, Season.ORDINARY, anchors.late_ordinary_week(date),
                     'corpus-christi')


def christ_the_king(anchors):
    date = anchors.christ_the_king
    week = anchors.late_ordinary_week(date)
    assert week == 34, week
    yield _solemnity(date, Season.ORDINARY, week, 'christ-the-king')
