# -*- coding: utf-8; -*-


class Citation(object):

    """A reference to a relevant document."""

    __slots__ = ('title', 'url')

    def __init__(self, title, url):
        self.title = title
        self.url = url

    def __str__(self):
        return self.title or self.url

    def __repr__(self):
        return 'Citation(%r, %r)' % (self.title, self.url)

    def __eq__(self, other):
        return isinstance(other, Citation) and \
            self.title == other.title and self.url == other.url

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.title, self.url))


class RFC(Citation):

    """A reference to an RFC document, optionally to one of its sections."""

    __slots__ = ('num', 'section')

    def __init__(self, num, section=None):
        self.num = num = int(num)
        self.section = section = str(section) if section else None
        title = 'RFC %d' % num
        url = 'https://tools.ietf.org/html/rfc%d' % num
        if section:
            title += ' § %s' % section
            url += '#section-%s' % section
        super(RFC, self).__init__(title, url)
