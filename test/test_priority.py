# -*- coding: utf-8; -*-

import pytest

from langneg.priority import format_priority_list, parse_priority_list
from langneg.structure import LanguageRange, PriorityEntry


def test_default_quality():
    assert parse_priority_list('en;q0.1') == [('en', 1)]
    assert parse_priority_list('en;q=undefined') == [('en', 1)]
    assert parse_priority_list('en;q=1.1') == [('en', 1)]
    assert parse_priority_list('en;q=1') == [('en', 1)]
    assert parse_priority_list('en;q=-0.5') == [('en', 1)]
    assert parse_priority_list('en;level=1') == [('en', 1)]


def test_quality_values():
    assert parse_priority_list('en;q=0.7') == [('en', 0.7)]
    assert parse_priority_list('en; q=0.7') == [('en', 0.7)]
    assert parse_priority_list('en;q= .5') == [('en', 0.5)]
    assert parse_priority_list('en;q=0.25xyz') == [('en', 0.25)]
    assert parse_priority_list('en;level=1;q=0.3') == [('en', 0.3)]
    assert parse_priority_list('en;q=0') == [('en', 0)]
    [entry] = parse_priority_list('en')
    assert isinstance(entry.quality, float)


@pytest.mark.parametrize('value', [None, 1, 0.5, True, {}, [], (), b'en'])
def test_not_a_string(value):
    assert parse_priority_list(value) == [('*', 1)]


def test_wildcard_default_is_fresh():
    list1 = parse_priority_list(None)
    list1.append(PriorityEntry(LanguageRange('en'), 1.0))
    assert parse_priority_list(None) == [('*', 1)]


def test_single_ranges():
    assert parse_priority_list('*') == [('*', 1)]
    assert parse_priority_list('en') == [('en', 1)]
    assert parse_priority_list('en-US') == [('en-US', 1)]
    assert parse_priority_list('zh-Hant-CN-x-private1-private2') == \
        [('zh-Hant-CN-x-private1-private2', 1)]
    assert parse_priority_list('  de-*-DE ;q=0.4 ') == [('de-*-DE', 0.4)]


def test_case_preserved():
    [entry] = parse_priority_list('EN-us')
    assert str(entry.tag) == 'EN-us'
    assert entry.tag == 'en-US'
    assert isinstance(entry.tag, LanguageRange)


def test_nothing_to_parse():
    assert parse_priority_list('') == []
    assert parse_priority_list('   ') == []
    assert parse_priority_list(';q=0.5') == []
    assert parse_priority_list('en GB') == []
    assert parse_priority_list(', ,;q=1,') == []


def test_line_breaks():
    assert parse_priority_list('en;q=0.5\n') == []
    assert parse_priority_list('en;q=0.5\n, de') == [('de', 1)]
    assert parse_priority_list('en-US\n') == [('en-US', 1)]


def test_non_ascii_digits():
    assert parse_priority_list('en;q=٠.٥') == [('en', 1)]
    assert parse_priority_list('en;q=0.٥') == [('en', 0)]


def test_bad_pieces_skipped():
    assert parse_priority_list('en GB, fr;q=0.5, , de') == \
        [('de', 1), ('fr', 0.5)]


def test_list_with_wildcard():
    assert parse_priority_list('en-GB,en-US;q=0.7,fr-CA;q=0.8,en;q=0.5, *') \
        == [
            ('*', 1),
            ('en-GB', 1),
            ('fr-CA', 0.8),
            ('en-US', 0.7),
            ('en', 0.5),
        ]


def test_sorted_by_quality_then_specificity():
    assert parse_priority_list(
        'en-GB,en-US;q=0.7,zh-Hant-CN;q=0.8,fr-CA;q=0.8,en;q=0.5') == [
            ('en-GB', 1),
            ('zh-Hant-CN', 0.8),
            ('fr-CA', 0.8),
            ('en-US', 0.7),
            ('en', 0.5),
        ]
    assert parse_priority_list('en, en-GB, en-GB-oxendict') == [
        ('en-GB-oxendict', 1),
        ('en-GB', 1),
        ('en', 1),
    ]


def test_ties_keep_input_order():
    assert [str(entry.tag)
            for entry in parse_priority_list('fr-CA, en-GB, de-AT')] == \
        ['fr-CA', 'en-GB', 'de-AT']


def test_wildcard_always_first():
    expected = [
        ('*', 1),
        ('en-GB', 1),
        ('zh-Hant-CN', 0.8),
        ('fr-CA', 0.8),
        ('en-US', 0.7),
        ('en', 0.5),
    ]
    assert parse_priority_list(
        'en-GB,en-US;q=0.7,*,zh-Hant-CN;q=0.8,fr-CA;q=0.8,en;q=0.5') == \
        expected
    assert parse_priority_list(
        '*,en-GB,en-US;q=0.7,zh-Hant-CN;q=0.8,fr-CA;q=0.8,en;q=0.5') == \
        expected
    assert parse_priority_list('en, fr;q=0.9, *;q=0')[0] == ('*', 0)


def test_format():
    entries = parse_priority_list('en-GB,en-US;q=0.7,*;q=0.1,fr-CA;q=0.8')
    formatted = format_priority_list(entries)
    assert formatted == '*;q=0.1, en-GB;q=1, fr-CA;q=0.8, en-US;q=0.7'
    assert parse_priority_list(formatted) == entries
    assert str(PriorityEntry(LanguageRange('de'), 0.125)) == 'de;q=0.125'
