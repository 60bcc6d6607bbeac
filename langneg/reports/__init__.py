# -*- coding: utf-8; -*-

from langneg.reports.html import html_report
from langneg.reports.text import text_report


formats = {
    'text': text_report,
    'html': html_report,
}
