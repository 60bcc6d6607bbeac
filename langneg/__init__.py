# -*- coding: utf-8; -*-

from langneg.__metadata__ import version as __version__
from langneg.matching import (ArityError, basic_filter, extended_filter,
                              extended_match, lookup, negotiate)
from langneg.priority import format_priority_list, parse_priority_list
from langneg.reports.html import html_report
from langneg.reports.text import text_report
from langneg.structure import (LanguageRange, LanguageTag, Negotiation,
                               PriorityEntry)

__all__ = [
    'ArityError',
    'LanguageRange',
    'LanguageTag',
    'Negotiation',
    'PriorityEntry',
    'basic_filter',
    'extended_filter',
    'extended_match',
    'format_priority_list',
    'html_report',
    'lookup',
    'negotiate',
    'parse_priority_list',
    'text_report',
]
