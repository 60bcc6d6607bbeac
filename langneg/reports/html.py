# -*- coding: utf-8; -*-

import pkgutil

import dominate
import dominate.tags as H

from langneg.__metadata__ import version
from langneg.matching import citations
from langneg.util.text import format_quality, nicely_join, printable


css_code = pkgutil.get_data('langneg.reports', 'html.css').decode('utf-8')


def html_report(negotiations, buf):
    """Generate an HTML report of negotiation results.

    :param negotiations:
        An iterable of :class:`~langneg.structure.Negotiation` objects,
        as returned by :func:`~langneg.negotiate`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    title = 'Language negotiation report'
    document = dominate.document(title=title)
    _common_meta(document)
    with document:
        H.h1(title)
        for negotiation in negotiations:
            _render_negotiation(negotiation)
    buf.write(document.render().encode('utf-8'))


def _common_meta(document):
    with document:
        H.attr(lang='en')
    with document.head:
        H.meta(charset='utf-8')
        H.meta(name='generator', content='langneg %s' % version)
        H.style(type='text/css').add_raw_string(css_code)
        H.base(_target='blank')


def _render_negotiation(negotiation):
    classes = 'negotiation'
    if not negotiation.matched:
        classes += ' no-match'
    with H.section(_class=classes):
        citation = citations[negotiation.method]
        with H.h2():
            H.span(negotiation.method)
            H.a(str(citation), href=citation.url)
        with H.dl():
            H.dt('Language range')
            H.dd(H.code(_range_text(negotiation.language_range)))
            if isinstance(negotiation.supported, (list, tuple)):
                H.dt('Supported tags')
                H.dd(printable(nicely_join(
                    [str(tag) for tag in negotiation.supported])))
            if negotiation.method == 'lookup':
                H.dt('Default')
                H.dd(printable(str(negotiation.default)))
        _render_priority_list(negotiation.priority_list)
        _render_result(negotiation)


def _range_text(language_range):
    if isinstance(language_range, str):
        return printable(language_range)
    return '(any)'


def _render_priority_list(entries):
    with H.table(_class='priority-list'):
        with H.tr():
            H.th('Range')
            H.th('Quality')
        for entry in entries:
            with H.tr():
                H.td(H.code(printable(entry.tag)))
                H.td(format_quality(entry.quality))


def _render_result(negotiation):
    if negotiation.method == 'priority':
        return
    H.h3('Result')
    if negotiation.method == 'lookup':
        H.p(H.code(printable(str(negotiation.result))))
    elif negotiation.result:
        with H.ol():
            for tag in negotiation.result:
                H.li(H.code(printable(tag)))
    else:
        H.p('No supported tag matches.')
