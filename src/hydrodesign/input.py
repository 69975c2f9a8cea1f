"""Input processing utilities for reading hydrodesign case decks

A deck is plain text with one case per data line. Blank lines and lines
starting with the comment character are skipped. A data line begins with a
case keyword followed by whitespace-separated numeric fields::

    # keyword  fields...
    RECT       2.0  1.0  0.001  0.015
"""

from math import isnan

from . import _logger

__author__ = "hydrodesign developers"
__license__ = "mit"


class InputLine(object):
    """Categorized and tokenized line of case deck input

        All attributes are read-only except ``ipos``.

        Attributes:
            line (str): Original line of input text with newline(s) removed
            type (str): One of 'blank', 'comment', or 'data'
            typecode (str): One of 'B', 'C', or 'D', corresponding to type
            ipos (int): Line number in original file (count starts at 1)
            ntok (int): Number of tokens found (0 except for 'data' lines)
            token ([str]): Tokens parsed from line ('data' lines only,
              otherwise empty)
            keyword (str): Upper-cased first token of a 'data' line, or ''

        Args:
            line (str): Original line of input text with newline(s) removed
            ipos (int): Line number in original file
            commentchar (str): leading character/string denoting that a line
              is a comment
    """

    def __init__(self, line, ipos=0, commentchar='#'):
        """Constructor """
        self.ipos = ipos

        self._line = line.rstrip('\r\n')
        self._token = ()

        tline = self._line.strip()

        if not tline:
            self._type = 'blank'
        elif commentchar and tline.startswith(commentchar):
            self._type = 'comment'
        else:
            self._type = 'data'
            self._token = tuple(tline.split())

    @property
    def line(self):
        """Original input line stripped of line terminators"""
        return self._line

    @property
    def type(self):
        """Type of input line; one of 'blank', 'comment', or 'data'"""
        return self._type

    @property
    def typecode(self):
        """Type code of input line; one of 'B', 'C', or 'D'"""
        return self._type[0].upper()

    @property
    def ntok(self):
        """Number of tokens found (0 except for 'data' lines)"""
        return len(self._token)

    @property
    def token(self):
        """Tokens parsed from line ('data' lines only, otherwise empty)"""
        return self._token

    @property
    def keyword(self):
        """Case keyword (first token, upper case) or '' if not data"""
        if self._token:
            return self._token[0].upper()
        return ''

    def values(self, names, optional=(), lookups=None):
        """Convert the tokens following the keyword into named floats

            A field that is not a number may instead name a material when
            ``lookups`` maps its field name to a lookup function. Underscores
            in the token stand for spaces, so ``cast_iron`` is passed on
            as "cast iron".

            Args:
                names ([str]): names of required fields, in order
                optional ([str]): names of trailing fields that may be
                  omitted
                lookups (dict): field name to function returning a float
                  for a material name

            Returns:
                (dict): field name to float value; omitted optional fields
                  are absent

            Raises:
                ValueError: too few fields, or a field that is neither a
                  number nor a known material
        """
        fields = self._token[1:]
        nreq = len(names)
        nmax = nreq + len(optional)
        if len(fields) < nreq:
            raise ValueError('Too few fields for {0:s} ({1:d} found, {2:d} '
                             'expected)'.format(self.keyword, len(fields),
                                                nreq))
        elif len(fields) > nmax:
            _logger.warning('Too many fields for {0:s} ({1:d} found, {2:d} '
                            'expected); extras ignored'
                            .format(self.keyword, len(fields), nmax))

        lookups = lookups or {}
        values = {}
        for i, (name, tok) in enumerate(zip(tuple(names) + tuple(optional),
                                            fields)):
            try:
                values[name] = float(tok)
            except ValueError:
                if name not in lookups:
                    raise ValueError('Cannot parse field {0:d}, {1:s} "{2:s}"'
                                     .format(i + 1, name, tok))
                values[name] = lookups[name](tok.replace('_', ' '))
                _logger.info('Field {0:d}, {1:s} "{2:s}" looked up as {3:g}'
                             .format(i + 1, name, tok, values[name]))
            if isnan(values[name]):
                raise ValueError('Field {0:d}, {1:s} is not a number'
                                 .format(i + 1, name))
            _logger.debug('{0:s} = {1:0.4E}'.format(name, values[name]))

        return values

    def as_log(self, logfmt='{0:-6d} [{1:s}] {2:s}'):
        """Return line number (ipos), type code, and original line to assist
        in finding input errors. Type code is 'B', 'C', or 'D', corresponding
        to 'blank', 'comment', and 'data', respectively

            Args:
                logfmt (str): Format string for producing log output. Field 0
                  is the `ipos` attribute, field 1 is the type code, and field
                  2 is the `line` attribute

            Returns:
                (str): Formatted line with metadata
        """
        return logfmt.format(self.ipos, self.typecode, self._line)
