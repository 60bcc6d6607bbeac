# -*- coding: utf-8; -*-

import codecs

from langneg.util.text import ellipsize, printable


def text_report(negotiations, buf):
    """Generate a plain-text report of negotiation results.

    :param negotiations:
        An iterable of :class:`~langneg.structure.Negotiation` objects,
        as returned by :func:`~langneg.negotiate`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    f = codecs.getwriter('utf-8')(buf)
    for negotiation in negotiations:
        f.write(_marker(negotiation))
        lines = _result_lines(negotiation)
        for line in lines or ['(none)']:
            f.write(printable(line) + '\n')


def _marker(negotiation):
    range_text = negotiation.language_range
    if not isinstance(range_text, str):
        range_text = '(any)'
    # The number 79 fits the default ``cmd.exe`` size in Windows.
    return ellipsize('------------ %s: %s' % (negotiation.method, range_text),
                     79) + '\n'


def _result_lines(negotiation):
    if negotiation.method == 'lookup':
        if negotiation.result is None:
            return []
        return [str(negotiation.result)]
    return [str(item) for item in negotiation.result]
