"""Regional variants of the General Roman Calendar.

A calendar is configured by a handful of named switches, each defaulting to
``False``.  They may be given as a plain mapping or read from a YAML file
such as::

    EpiphanyOnSunday: true
    AscensionOriginal: false
"""

from collections import OrderedDict
from collections.abc import Mapping
import logging

import yaml


logger = logging.getLogger(__name__)


EPIPHANY_ON_SUNDAY = 'EpiphanyOnSunday'
ASCENSION_ORIGINAL = 'AscensionOriginal'
CORPUS_ORIGINAL = 'CorpusOriginal'
IMMACULATE_PREVAILS = 'ImmaculatePrevails'

DEFAULTS = OrderedDict([
    # Epiphany on the Sunday from 2 to 8 January rather than on 6 January.
    (EPIPHANY_ON_SUNDAY, False),
    # Ascension kept on the Thursday rather than the following Sunday.
    (ASCENSION_ORIGINAL, False),
    # Corpus Christi kept on the Thursday after Trinity Sunday.
    (CORPUS_ORIGINAL, False),
    # 8 December kept even when it is a Sunday of Advent.
    (IMMACULATE_PREVAILS, False),
])


class OptionsError(ValueError):
    pass


class Options(Mapping):
    """Immutable mapping from option name to boolean.  Every recognised name
    is present; names that were not given take their default.
    """

    def __init__(self, values=None):
        self._values = OrderedDict(DEFAULTS)
        for (name, value) in (values or {}).items():
            if name not in DEFAULTS:
                logger.warning("Ignoring unknown calendar option %r", name)
                continue
            if not isinstance(value, bool):
                raise OptionsError("Option %s must be true or false, not %r" %
                                   (name, value))
            self._values[name] = value

    @classmethod
    def coerce(cls, options):
        if isinstance(options, cls):
            return options
        if options is not None and not isinstance(options, Mapping):
            raise OptionsError("Calendar options must be a mapping, not %r" %
                               (options,))
        return cls(options)

    @classmethod
    def load(cls, path):
        with open(path, encoding='utf-8') as f:
            raw = yaml.load(f, Loader=yaml.SafeLoader)
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise OptionsError("%s: expected a mapping of options" % (path,))
        return cls(raw)

    def __getitem__(self, name):
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __hash__(self):
        return hash(tuple(self._values.items()))

    def __repr__(self):
        return "Options(%s)" % (', '.join('%s=%s' % item
                                          for item in self._values.items()),)

    @property
    def epiphany_on_sunday(self):
        return self._values[EPIPHANY_ON_SUNDAY]

    @property
    def ascension_original(self):
        return self._values[ASCENSION_ORIGINAL]

    @property
    def corpus_original(self):
        return self._values[CORPUS_ORIGINAL]

    @property
    def immaculate_prevails(self):
        return self._values[IMMACULATE_PREVAILS]
