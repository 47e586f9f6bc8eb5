"""Assembly of the full calendar of a civil year."""

from collections import OrderedDict
from collections.abc import Sequence
import itertools
import logging
import operator

from . import sanctoral
from . import temporal
from .anchors import Anchors
from .computus import Date


logger = logging.getLogger(__name__)


# Every block of the year, in invocation order.  Entries falling on the same
# date keep this order in the result.
generators = OrderedDict([
    ('mary-mother-of-god', sanctoral.mary_mother_of_god),
    ('christmas-weekdays', temporal.christmas_weekdays),
    ('epiphany', temporal.epiphany),
    ('baptism-of-the-lord', temporal.baptism_of_the_lord),
    ('early-ordinary-sundays', temporal.early_ordinary_sundays),
    ('early-ordinary-weekdays', temporal.early_ordinary_weekdays),
    ('joseph', sanctoral.joseph),
    ('annunciation', sanctoral.annunciation),
    ('triduum', temporal.triduum),
    ('lent-sundays', temporal.lent_sundays),
    ('ash-wednesday-week', temporal.ash_wednesday_week),
    ('lent-weekdays', temporal.lent_weekdays),
    ('holy-week', temporal.holy_week),
    ('easter-octave', temporal.easter_octave),
    ('easter-sundays', temporal.easter_sundays),
    ('easter-weekdays', temporal.easter_weekdays),
    ('ascension', sanctoral.ascension),
    ('trinity-sunday', sanctoral.trinity_sunday),
    ('corpus-christi', sanctoral.corpus_christi),
    ('late-ordinary-sundays', temporal.late_ordinary_sundays),
    ('late-ordinary-weekdays', temporal.late_ordinary_weekdays),
    ('christ-the-king', sanctoral.christ_the_king),
    ('advent-sundays', temporal.advent_sundays),
    ('advent-weekdays', temporal.advent_weekdays),
    ('immaculate-conception', sanctoral.immaculate_conception),
    ('nativity', temporal.nativity),
    ('holy-family', temporal.holy_family),
    ('christmas-octave', temporal.christmas_octave),
])


class YearCalendar(Sequence):
    """The celebrations of one civil year, sorted by date.  Two entries on
    the same date are both kept, in the order of their generators; resolving
    precedence between them is left to the caller.
    """

    def __init__(self, year, options=None):
        self.anchors = Anchors(year, options)
        self._celebrations = tuple(sorted(self._generate(self.anchors),
                                          key=operator.attrgetter('date')))
        self._by_date = {
            date: tuple(entries) for (date, entries) in itertools.groupby(
                self._celebrations, key=operator.attrgetter('date'))
        }

    @staticmethod
    def _generate(anchors):
        for (name, generator) in generators.items():
            entries = list(generator(anchors))
            logger.debug("%s: %d entries for %d", name, len(entries),
                         anchors.year)
            yield from entries

    @property
    def year(self):
        return self.anchors.year

    @property
    def options(self):
        return self.anchors.options

    def on(self, date):
        """Returns the celebrations on the specified date, possibly none."""
        return self._by_date.get(Date.coerce(date), ())

    def __getitem__(self, index):
        return self._celebrations[index]

    def __len__(self):
        return len(self._celebrations)

    def __eq__(self, other):
        if not isinstance(other, YearCalendar):
            return NotImplemented
        return (self.year == other.year and self.options == other.options and
                self._celebrations == other._celebrations)

    def __hash__(self):
        return hash((self.year, self.options, self._celebrations))

    def __repr__(self):
        return "YearCalendar(%d, %r)" % (self.year, self.options)


def generate(year, options=None):
    """Returns the celebrations of the specified year, sorted by date, under
    the specified options (a mapping of option names to booleans).
    """
    return list(YearCalendar(year, options))
