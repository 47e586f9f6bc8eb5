#!/usr/bin/env python3

"""Print the General Roman Calendar of the specified year."""

import argparse
import logging

import jinja2

from calendarium.calendar import YearCalendar
from calendarium.options import DEFAULTS, Options


LINE_TEMPLATE = jinja2.Template(
    '{{ c.date.isoformat() }}  {{ "%-32s"|format(c.code) }} '
    '{{ c.rank.name.lower() }}  {{ c.color.name.lower() }}  '
    'psalter {{ c.psalter_week }}'
)


def parse_args():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--options', '-o', metavar='FILE',
                        help="YAML file of calendar options.")
    for name in DEFAULTS:
        parser.add_argument('--' + name, action='store_true',
                            help="Set the %s option." % (name,))
    parser.add_argument('--verbose', '-v', action='store_true')
    parser.add_argument('year', type=int, help="Year to generate.")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else
                        logging.WARNING)

    options = dict(Options.load(args.options)) if args.options else {}
    for name in DEFAULTS:
        if getattr(args, name):
            options[name] = True

    for celebration in YearCalendar(args.year, options):
        print(LINE_TEMPLATE.render(c=celebration))


if __name__ == '__main__':
    main()
