# -*- coding: utf-8; -*-

import re


def nicely_join(strings):
    """
    >>> print(nicely_join(['en']))
    en
    >>> print(nicely_join(['en', 'de-CH']))
    en and de-CH
    >>> print(nicely_join(['en', 'de-CH', 'fr']))
    en, de-CH, and fr
    """
    joined = ''
    for i, s in enumerate(strings):
        if i == len(strings) - 1:
            if len(strings) > 2:
                joined += 'and '
            elif len(strings) > 1:
                joined += ' and '
        joined += s
        if len(strings) > 2 and i < len(strings) - 1:
            joined += ', '
    return joined


def format_quality(quality):
    """Format a quality value the way ``qvalue`` is written in HTTP.

    >>> print(format_quality(0.8))
    0.8
    >>> print(format_quality(1.0))
    1
    >>> print(format_quality(0.125))
    0.125
    >>> print(format_quality(0))
    0
    """
    return ('%.3f' % quality).rstrip('0').rstrip('.')


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize('lorem ipsum dolor sit amet', 40))
    lorem ipsum dolor sit amet
    >>> print(ellipsize('lorem ipsum dolor sit amet', 20))
    lorem ipsum dolor...
    """
    if len(s) > max_length:
        ellipsis = '...'
        return s[:(max_length - len(ellipsis))] + ellipsis
    else:
        return s


def printable(s):
    # Based on `XML 1.0 section 2.2 <https://www.w3.org/TR/xml/#charsets>`_,
    # with the addition of U+0085.
    return re.sub(
        pattern=('[\u0000-\u0008\u000B\u000C\u000E-\u001F'
                 '\u007F-\u009F\uD800-\uDFFF\uFDD0-\uFDEF\uFFFE\uFFFF]'),
        repl='\N{REPLACEMENT CHARACTER}',
        string=s
    )
