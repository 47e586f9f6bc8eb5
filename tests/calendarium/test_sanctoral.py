"""Tests for the individually placed solemnities and their displacement."""

import datetime

import pytest

from calendarium import sanctoral
from calendarium.anchors import Anchors
from calendarium.celebration import Rank, Season


def only(generator, year, options=None):
    [celebration] = generator(Anchors(year, options))
    return celebration


class TestMaryMotherOfGod:
    def test_first_of_january(self):
        celebration = only(sanctoral.mary_mother_of_god, 2022)
        assert celebration.date == datetime.date(2022, 1, 1)
        assert celebration.rank is Rank.SOLEMN
        assert celebration.season is Season.CHRISTMAS


class TestJoseph:
    @pytest.mark.parametrize("year,month,day", [
        (2022, 3, 19),   # Saturday in Lent
        (2023, 3, 20),   # Fourth Sunday of Lent
        (2008, 3, 15),   # Wednesday of Holy Week
        (2016, 3, 19),   # Saturday before Palm Sunday
    ])
    def test_displacement(self, year, month, day):
        celebration = only(sanctoral.joseph, year)
        assert celebration.date == datetime.date(year, month, day)
        assert celebration.qualifier == 'joseph'


class TestAnnunciation:
    @pytest.mark.parametrize("year,month,day", [
        (2022, 3, 25),   # Friday in Lent
        (2012, 3, 26),   # Fifth Sunday of Lent
        (2016, 4, 4),    # Good Friday
        (2018, 4, 9),    # Palm Sunday
        (2024, 4, 8),    # Monday of Holy Week
    ])
    def test_displacement(self, year, month, day):
        celebration = only(sanctoral.annunciation, year)
        assert celebration.date == datetime.date(year, month, day)


class TestImmaculateConception:
    def test_weekday_kept(self):
        assert only(sanctoral.immaculate_conception, 2022).date == \
            datetime.date(2022, 12, 8)

    def test_advent_sunday_moves_by_default(self):
        assert only(sanctoral.immaculate_conception, 2024).date == \
            datetime.date(2024, 12, 9)

    def test_advent_sunday_moves_when_not_prevailing(self):
        options = {'ImmaculatePrevails': False}
        assert only(sanctoral.immaculate_conception, 2024, options).date == \
            datetime.date(2024, 12, 9)

    def test_prevails(self):
        options = {'ImmaculatePrevails': True}
        assert only(sanctoral.immaculate_conception, 2024, options).date == \
            datetime.date(2024, 12, 8)


class TestAscension:
    def test_transferred_to_sunday(self):
        celebration = only(sanctoral.ascension, 2022)
        assert celebration.date == datetime.date(2022, 5, 29)
        assert celebration.season_week == 7
        assert celebration.weekday == 0

    def test_thursday(self):
        celebration = only(sanctoral.ascension, 2022,
                           {'AscensionOriginal': True})
        assert celebration.date == datetime.date(2022, 5, 26)
        assert celebration.season_week == 6
        assert celebration.weekday == 4

    @pytest.mark.parametrize("year", range(2020, 2030))
    def test_option_moves_by_three_days(self, year):
        thursday = only(sanctoral.ascension, year, {'AscensionOriginal': True})
        sunday = only(sanctoral.ascension, year, {'AscensionOriginal': False})
        assert sunday.date - thursday.date == 3


class TestSolemnitiesOfOrdinaryTime:
    def test_trinity(self):
        celebration = only(sanctoral.trinity_sunday, 2022)
        assert celebration.date == datetime.date(2022, 6, 12)
        assert celebration.season_week == 11

    def test_corpus_christi(self):
        celebration = only(sanctoral.corpus_christi, 2022)
        assert celebration.date == datetime.date(2022, 6, 19)
        assert celebration.season_week == 12

    def test_corpus_christi_on_thursday(self):
        celebration = only(sanctoral.corpus_christi, 2022,
                           {'CorpusOriginal': True})
        assert celebration.date == datetime.date(2022, 6, 16)
        assert celebration.season_week == 11
        assert celebration.weekday == 4

    def test_christ_the_king(self):
        celebration = only(sanctoral.christ_the_king, 2022)
        assert celebration.date == datetime.date(2022, 11, 20)
        assert celebration.season_week == 34
        assert celebration.psalter_week == 2

    def test_christ_the_king_always_week_34(self):
        for year in range(1900, 2100):
            assert only(sanctoral.christ_the_king, year).season_week == 34
