"""Tests for the assembled calendar of a year."""

import datetime
import itertools
import logging

import pytest

from calendarium import calendar
from calendarium.calendar import YearCalendar, generate
from calendarium.celebration import Celebration, Season
from calendarium.computus import Date
from calendarium.options import DEFAULTS


def all_options():
    for values in itertools.product([False, True], repeat=len(DEFAULTS)):
        yield dict(zip(DEFAULTS, values))


def days_of_year(year):
    current = Date(year, 1, 1)
    while current.year == year:
        yield current
        current += 1


class TestGenerate:
    def test_returns_celebrations_sorted_by_date(self):
        celebrations = generate(2022, {})
        assert all(isinstance(c, Celebration) for c in celebrations)
        dates = [c.date for c in celebrations]
        assert dates == sorted(dates)

    def test_deterministic(self):
        options = {'EpiphanyOnSunday': True, 'AscensionOriginal': True}
        assert generate(2023, options) == generate(2023, options)
        assert generate(2022, {}) == generate(2022, None)

    def test_no_state_carried_between_years(self):
        first = generate(2022, {})
        generate(2023, {'EpiphanyOnSunday': True, 'CorpusOriginal': True})
        assert generate(2022, {}) == first

    def test_entry_count_2022(self):
        # Every day once, plus Joseph, the Annunciation, the Ascension and the
        # Immaculate Conception coinciding with days of their seasons.
        assert len(generate(2022)) == 365 + 4

    @pytest.mark.parametrize("year", range(2020, 2030))
    def test_every_day_covered(self, year):
        for options in all_options():
            covered = {c.date for c in generate(year, options)}
            assert covered == set(days_of_year(year))

    @pytest.mark.parametrize("year", range(2020, 2030))
    def test_psalter_week_in_cycle(self, year):
        for c in generate(year, {'EpiphanyOnSunday': True}):
            assert c.psalter_week in (1, 2, 3, 4)
            if c.season_week >= 1 and c.season_week % 4 == 0:
                assert c.psalter_week == 4

    @pytest.mark.parametrize("year", range(2020, 2030))
    def test_ordinary_weeks_within_bounds(self, year):
        for options in all_options():
            for c in generate(year, options):
                if c.season is Season.ORDINARY:
                    assert 1 <= c.season_week <= 34

    def test_ascension_option_moves_only_ascension(self):
        thursday = generate(2022, {'AscensionOriginal': True})
        sunday = generate(2022, {'AscensionOriginal': False})
        [a] = [c for c in thursday if c.qualifier == 'ascension']
        [b] = [c for c in sunday if c.qualifier == 'ascension']
        assert b.date - a.date == 3
        others = [c for c in thursday if c.qualifier != 'ascension']
        assert others == [c for c in sunday if c.qualifier != 'ascension']

    def test_epiphany_option(self):
        fixed = generate(2023, {'EpiphanyOnSunday': False})
        sunday = generate(2023, {'EpiphanyOnSunday': True})
        assert [c.date for c in fixed if c.qualifier == 'epiphany'] == [
            datetime.date(2023, 1, 6)]
        assert [c.date for c in sunday if c.qualifier == 'epiphany'] == [
            datetime.date(2023, 1, 8)]

    def test_first_and_last_days(self):
        celebrations = generate(2022)
        assert celebrations[0].date == datetime.date(2022, 1, 1)
        assert celebrations[0].qualifier == 'mary-mother-of-god'
        assert celebrations[-1].date == datetime.date(2022, 12, 31)

    @pytest.mark.parametrize("year", [1, 1582, 9999])
    def test_extreme_years(self, year):
        assert generate(year)

    def test_unsupported_year(self):
        with pytest.raises(ValueError):
            generate(0)

    def test_logs_generator_sizes(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='calendarium.calendar'):
            generate(2022)
        assert "lent-sundays: 5 entries for 2022" in caplog.text


class TestYearCalendar:
    def test_sequence(self):
        year_calendar = YearCalendar(2022)
        assert len(year_calendar) == len(generate(2022))
        assert list(year_calendar) == generate(2022)
        assert year_calendar[0].date == datetime.date(2022, 1, 1)

    def test_properties(self):
        year_calendar = YearCalendar(2023, {'CorpusOriginal': True})
        assert year_calendar.year == 2023
        assert year_calendar.options.corpus_original
        assert year_calendar.anchors.corpus_christi == datetime.date(2023, 6, 8)

    def test_equality(self):
        assert YearCalendar(2022) == YearCalendar(2022, {})
        assert YearCalendar(2022) != YearCalendar(2023)
        assert YearCalendar(2022) != YearCalendar(
            2022, {'AscensionOriginal': True})

    def test_on_date(self):
        year_calendar = YearCalendar(2022)
        [easter] = year_calendar.on(datetime.date(2022, 4, 17))
        assert easter.qualifier == 'resurrection'
        assert year_calendar.on(Date(2023, 1, 1)) == ()

    def test_coinciding_entries_kept_in_generator_order(self):
        # The Ascension, transferred to the seventh Sunday of Easter.
        sunday, ascension = YearCalendar(2022).on(datetime.date(2022, 5, 29))
        assert sunday.season is Season.EASTER
        assert sunday.qualifier is None
        assert ascension.qualifier == 'ascension'

    def test_generator_order(self):
        names = list(calendar.generators)
        assert names.index('easter-sundays') < names.index('ascension')
        assert len(set(calendar.generators.values())) == len(names)
