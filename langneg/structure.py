# -*- coding: utf-8; -*-

"""Classes for representing language tags, ranges and negotiation results."""

from collections import namedtuple

from langneg.util.text import format_quality


WILDCARD = '*'


class ProtocolString(str):

    """Base class for the strings that the matching functions work on."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


class CaseInsensitive(ProtocolString):

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, str):
            return self.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.lower())

    def startswith(self, other):
        return self.lower().startswith(other.lower())

    def endswith(self, other):
        return self.lower().endswith(other.lower())


class LanguageTag(CaseInsensitive):

    """A language tag (RFC 5646), such as ``zh-Hant-CN``."""

    __slots__ = ()

    @property
    def subtags(self):
        return split_subtags(self)


class LanguageRange(LanguageTag):

    """A language range (RFC 4647 Section 2).

    Basic ranges look just like language tags, plus the ``*`` wildcard.
    Extended ranges may also contain ``*`` in place of any subtag,
    as in ``de-*-DE``.
    """

    __slots__ = ()

    @property
    def wildcard(self):
        return self == WILDCARD


class PriorityEntry(namedtuple('PriorityEntry', ('tag', 'quality'))):

    """One language range from a priority list, with its quality value."""

    __slots__ = ()

    def __str__(self):
        return '%s;q=%s' % (self.tag, format_quality(self.quality))


class Negotiation(namedtuple('Negotiation',
                             ('method', 'language_range', 'supported',
                              'default', 'priority_list', 'result',
                              'matched'))):

    """The inputs and outcome of one run of a matching method.

    For ``lookup``, :attr:`result` is a single tag (or the default);
    for the other methods, it is a list. :attr:`matched` tells whether
    anything matched, which for ``lookup`` cannot be read off the result
    when the default is also a supported tag.
    """

    __slots__ = ()


def split_subtags(tag):
    return tag.split('-')


def is_singleton(subtag):
    """Is `subtag` a singleton (RFC 5646 Section 2.2.6)?

    Singletons introduce extensions and private use sequences (``x``).
    We go by length alone, as RFC 4647 does.
    """
    return len(subtag) == 1
