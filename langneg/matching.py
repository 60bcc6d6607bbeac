# -*- coding: utf-8; -*-

"""Matching a Language Priority List against the language tags we support.

Three schemes from RFC 4647 are implemented:

- :func:`basic_filter` (Section 3.3.1) returns every supported tag
  that a range matches exactly or as a hyphen-bounded prefix;
- :func:`extended_filter` (Section 3.3.2) also lets ranges contain
  ``*`` subtags, as in ``de-*-DE``;
- :func:`lookup` (Section 3.4) picks the single best tag, falling back to
  a caller-supplied default.

All of them accept garbage input without complaint: a range that is not
a string means "anything" (see :func:`~langneg.priority.parse_priority_list`),
and supported tags that are not a list mean "nothing".
The one exception is :func:`lookup` called with the wrong number
of arguments, which raises :exc:`ArityError`.
"""

from langneg.citation import RFC
from langneg.priority import parse_priority_list
from langneg.structure import (WILDCARD, Negotiation, is_singleton,
                               split_subtags)


class ArityError(TypeError):

    pass


_missing = object()


def _same(a, b):
    return a.lower() == b.lower()


def _usable(supported_tags):
    if not isinstance(supported_tags, (list, tuple)):
        return []
    return [tag for tag in supported_tags if isinstance(tag, str) and tag]


def basic_filter(language_range, supported_tags=None):
    """Basic Filtering (RFC 4647 Section 3.3.1).

    :param language_range:
        A string such as ``en-GB,en;q=0.8``.
    :param supported_tags:
        A list of language tags that are available.
    :return:
        The supported tags that match, ordered by the priority
        of the range that matched them.
    """
    if not isinstance(supported_tags, (list, tuple)):
        return []
    priority_list = parse_priority_list(language_range)
    if priority_list and priority_list[0].tag.wildcard:
        return list(supported_tags)

    tags = _usable(supported_tags)
    r = []
    for entry in priority_list:
        prefix = entry.tag.lower() + '-'
        for tag in tags:
            if _same(entry.tag, tag) or tag.lower().startswith(prefix):
                if tag not in r:
                    r.append(tag)
    return r


def extended_match(range_subtags, tag_subtags):
    """Does an extended language range match a language tag?

    Both arguments are lists of subtags. Every non-wildcard subtag
    of the range must be found, in order, among those of the tag.
    A ``*`` allows anything in between, but nothing matches past
    a singleton in the tag.

    >>> extended_match(['de', '*', 'DE'], ['de', 'Latn', 'DE'])
    True
    >>> extended_match(['de', '*', 'DE'], ['de', 'x', 'DE'])
    False
    """
    (i, j) = (0, 0)
    while i < len(range_subtags):
        if j >= len(tag_subtags) or is_singleton(tag_subtags[j]):
            return False
        if range_subtags[i] == WILDCARD:
            i += 1
        if i < len(range_subtags) and _same(range_subtags[i], tag_subtags[j]):
            i += 1
        j += 1
    return True


def extended_filter(language_range, supported_tags=None):
    """Extended Filtering (RFC 4647 Section 3.3.2).

    Results are grouped by range, in priority order, and then follow
    the order of `supported_tags`. A tag matched by several ranges
    is listed once.
    """
    tags = _usable(supported_tags)
    if not tags:
        return []
    r = []
    for entry in parse_priority_list(language_range):
        range_subtags = split_subtags(entry.tag)
        for tag in tags:
            if tag not in r and extended_match(range_subtags,
                                               split_subtags(tag)):
                r.append(tag)
    return r


def lookup(language_range=_missing, supported_tags=_missing,
           default=_missing, *extra):
    """Lookup (RFC 4647 Section 3.4).

    First, a supported tag that is equal to one of the ranges wins.
    Failing that, each range is compared subtag by subtag with each
    supported tag, most specific tags first. The longest common
    beginning, cut short at any singleton, is the answer. Note that it
    is spelled as in the range, and is never more specific than the range:
    ``de-CH`` against ``de-CH-1996`` gives ``de-CH``.

    :return: A language tag, or `default` if nothing matches.
    :raises ArityError: unless called with exactly three arguments.
    """
    if extra or any(arg is _missing
                    for arg in (language_range, supported_tags, default)):
        raise ArityError('language_range, supported_tags and default '
                         'are all required')
    tags = _usable(supported_tags)
    if not tags:
        return default
    priority_list = parse_priority_list(language_range)

    for entry in priority_list:
        for tag in tags:
            if _same(entry.tag, tag):
                return tag

    by_specificity = sorted(tags, key=len, reverse=True)
    for entry in priority_list:
        for tag in by_specificity:
            candidate = _truncated_match(entry.tag, tag)
            if candidate:
                return candidate

    return default


def _truncated_match(range_tag, tag):
    matched = []
    for (range_subtag, subtag) in zip(split_subtags(range_tag),
                                      split_subtags(tag)):
        if is_singleton(range_subtag) or is_singleton(subtag):
            break
        if not _same(range_subtag, subtag):
            return None
        matched.append(range_subtag)
    return '-'.join(matched)


def _priority(language_range, supported_tags, default):
    return parse_priority_list(language_range)


def _basic(language_range, supported_tags, default):
    return basic_filter(language_range, supported_tags)


def _extended(language_range, supported_tags, default):
    return extended_filter(language_range, supported_tags)


methods = {
    'priority': _priority,
    'basic': _basic,
    'extended': _extended,
    'lookup': lookup,
}

citations = {
    'priority': RFC(4647, section='2.3'),
    'basic': RFC(4647, section='3.3.1'),
    'extended': RFC(4647, section='3.3.2'),
    'lookup': RFC(4647, section='3.4'),
}


def negotiate(method, language_range, supported_tags=None, default=None):
    """Run one of the matching `methods` and record what happened.

    :param method: One of the keys of :data:`methods`.
    :return: A :class:`~langneg.structure.Negotiation`.
    :raises KeyError: if `method` is unknown.
    """
    run = methods[method]
    if method == 'lookup':
        # The default may itself be a supported tag, so tell a fallback
        # from a match by passing our own marker instead.
        result = run(language_range, supported_tags, _missing)
        matched = result is not _missing
        if not matched:
            result = default
    else:
        result = run(language_range, supported_tags, default)
        matched = bool(result)
    return Negotiation(method, language_range, supported_tags, default,
                       parse_priority_list(language_range), result, matched)
