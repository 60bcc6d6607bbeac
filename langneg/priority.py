# -*- coding: utf-8; -*-

"""Parsing language ranges into a Language Priority List.

A Language Priority List (RFC 4647 Section 2.3) is what an ``Accept-Language``
header (RFC 7231 Section 5.3.5) expresses: a comma-separated sequence of
language ranges, each optionally weighted with a ``q`` parameter.

Parsing here is lenient. Pieces that do not look like a language range
are skipped, and a quality value that cannot be understood counts as 1.
Nothing is ever rejected with an exception.
"""

from functools import singledispatch
import re

from langneg.structure import WILDCARD, LanguageRange, PriorityEntry


_piece_re = re.compile(r'^\s*([^\s\-;]+)(?:-([^\s;]+))?\s*(?:;(.*))?\Z')
_float_re = re.compile(r'\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)',
                       re.ASCII)


@singledispatch
def parse_priority_list(language_range):
    """Parse `language_range` into a list of :class:`PriorityEntry`.

    Anything that is not a string stands for "no preference",
    which is the wildcard range.
    """
    return [PriorityEntry(LanguageRange(WILDCARD), 1.0)]


@parse_priority_list.register(str)
def _parse_text(language_range):
    entries = []
    for piece in language_range.split(','):
        entry = _parse_piece(piece)
        if entry is not None:
            entries.append(entry)
    return sorted(entries, key=_priority_key)


def _parse_piece(piece):
    match = _piece_re.match(piece)
    if match is None:
        return None
    (primary, rest, params) = match.groups()
    tag = primary + '-' + rest if rest else primary
    return PriorityEntry(LanguageRange(tag), _extract_quality(params))


def _extract_quality(params):
    if not params or 'q=' not in params:
        return 1.0
    match = _float_re.match(params.split('q=')[1])
    if match is None:
        return 1.0
    quality = float(match.group(1))
    if 0 <= quality < 1:
        return quality
    return 1.0


def _priority_key(entry):
    # The wildcard goes first no matter its quality; then higher quality,
    # then longer (more specific) ranges.
    return (not entry.tag.wildcard, -entry.quality, -len(entry.tag))


def format_priority_list(entries):
    """Serialize a priority list back into ``Accept-Language`` form.

    >>> print(format_priority_list(parse_priority_list('en;q=0.5, de-CH')))
    de-CH;q=1, en;q=0.5
    """
    return ', '.join(str(entry) for entry in entries)
