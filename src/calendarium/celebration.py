from collections import namedtuple
import enum


class Season(enum.Enum):
    ADVENT = 'Adv'
    CHRISTMAS = 'Nat'
    ORDINARY = 'Per'
    LENT = 'Quad'
    TRIDUUM = 'Tri'
    EASTER = 'Pasc'
    # Solemnities fixed to a calendar date rather than to a season.
    SANCTORAL = 'Sanct'


class Color(enum.IntEnum):
    WHITE = 0
    VIOLET = 1
    RED = 2
    GREEN = 3
    ROSE = 4


class Rank(enum.IntEnum):
    FERIAL = 1
    # Sundays, solemnities and the days of the Triduum.
    SOLEMN = 2


class Code(namedtuple('Code', 'season week weekday qualifier')):
    """Identifies a day in the liturgical year: the season, the (one-based)
    week within it, the day of the week from Sunday at zero, and optionally a
    short slug naming a particular observance.
    """
    __slots__ = ()

    def __new__(cls, season, week, weekday, qualifier=None):
        assert 0 <= weekday <= 6, weekday
        return super().__new__(cls, season, week, weekday, qualifier)

    def __str__(self):
        calpoint = '%s%d-%d' % (self.season.value, self.week, self.weekday)
        if self.qualifier:
            calpoint += ':' + self.qualifier
        return calpoint


class Celebration:
    """One dated observance.  Instances are read-only once constructed."""

    __slots__ = ('_sequence_id', '_date', '_code', '_rank', '_color')

    def __init__(self, sequence_id, date, code, rank, color):
        self._sequence_id = sequence_id
        self._date = date
        self._code = code
        self._rank = Rank(rank)
        self._color = Color(color)

    @property
    def sequence_id(self):
        return self._sequence_id

    @property
    def date(self):
        return self._date

    @property
    def code(self):
        return self._code

    @property
    def rank(self):
        return self._rank

    @property
    def color(self):
        return self._color

    @property
    def season(self):
        return self._code.season

    @property
    def season_week(self):
        return self._code.week

    @property
    def weekday(self):
        return self._code.weekday

    @property
    def qualifier(self):
        return self._code.qualifier

    @property
    def psalter_week(self):
        """Index into the four-week cycle of the psalter."""
        psalter_week = self.season_week % 4 or 4
        assert 1 <= psalter_week <= 4, psalter_week
        return psalter_week

    def _key(self):
        return (self._sequence_id, self._date, self._code, self._rank,
                self._color)

    def __eq__(self, other):
        if not isinstance(other, Celebration):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return "%s: %s" % (self._date.isoformat(), self._code)

    def __repr__(self):
        return "Celebration(%d, %s, %s, %s, %s)" % (
            self._sequence_id, self._date.isoformat(), self._code,
            self._rank.name, self._color.name)
