import logging
import re

from uuid import uuid4

from simplerdf.dictionaries.namespaces import RDF_LANG_STRING, XSD_STRING
from simplerdf.exceptions import InvalidArgumentError, InvalidTermError

__doc__ = """
RDF terms.

There are exactly three kinds of term: :py:class:`IRI`,
:py:class:`BlankNode` and :py:class:`Literal`. They all derive from
:py:class:`RDFTerm` and no other direct subclass of it can be defined.

All terms are immutable and hashable, and render their canonical N-Triples
form with :py:meth:`RDFTerm.ntriples_string` (also returned by ``str()``).
"""

logger = logging.getLogger(__name__)

# Characters that may not appear unescaped in an IRI reference.
IRI_INVALID_CHARS = re.compile(r'[\x00-\x20<>"{}|^`\\]')
IRI_SCHEME = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')
LANG_TAG = re.compile(r'[a-zA-Z]{1,8}(-[a-zA-Z0-9]{1,8})*')
# N-Triples BLANK_NODE_LABEL, restricted to ASCII.
BNODE_LABEL = re.compile(r'[A-Za-z0-9_]([A-Za-z0-9_.\-]*[A-Za-z0-9_\-])?')

# N-Triples ECHAR escapes for literal lexical forms.
_LITERAL_ESCAPES = str.maketrans({
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
})


class RDFTerm:
    """
    Base class of the RDF terms.

    The set of term kinds is fixed by the RDF data model: this class may only
    be subclassed directly within this module.
    """
    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if RDFTerm in cls.__bases__ and cls.__module__ != __name__:
            raise TypeError(
                'RDF term kinds are fixed to IRI, BlankNode and Literal; '
                'cannot define {}.'.format(cls.__qualname__))


    def __setattr__(self, name, value):
        raise AttributeError(
                '{} is immutable.'.format(self.__class__.__name__))


    def __delattr__(self, name):
        raise AttributeError(
                '{} is immutable.'.format(self.__class__.__name__))


    def __str__(self):
        return self.ntriples_string()


    def ntriples_string(self):
        """
        Canonical N-Triples representation of the term.

        :rtype: str
        """
        raise NotImplementedError()



class IRI(RDFTerm):
    """
    IRI reference.

    Two IRIs are equal if their strings are exactly equal. No normalization
    of any kind (case, percent-encoding, Unicode) is performed.
    """
    __slots__ = ('_iri_string',)

    def __init__(self, iri_string, allow_relative=True):
        """
        Validate and wrap an IRI string.

        :param str iri_string: Absolute or relative IRI reference.
        :param bool allow_relative: Whether relative references are accepted.

        :raise InvalidTermError: if the string contains characters that are
            not allowed in an IRI, or if it is a relative reference and
            ``allow_relative`` is false.
        """
        if not isinstance(iri_string, str):
            raise TypeError(
                    'IRI string must be a str, not {}.'.format(
                    type(iri_string).__name__))
        if IRI_INVALID_CHARS.search(iri_string):
            logger.debug('Rejecting IRI with invalid characters: {!r}'.format(
                    iri_string))
            raise InvalidTermError(iri_string)
        if not allow_relative and not IRI_SCHEME.match(iri_string):
            logger.debug('Rejecting relative IRI: {!r}'.format(iri_string))
            raise InvalidTermError(
                    iri_string,
                    'Relative IRI {!r} is not supported.'.format(iri_string))

        object.__setattr__(self, '_iri_string', iri_string)


    @property
    def iri_string(self):
        """
        The IRI reference as a string.

        :rtype: str
        """
        return self._iri_string


    def is_absolute(self):
        """
        Whether the IRI starts with a scheme.

        :rtype: bool
        """
        return IRI_SCHEME.match(self._iri_string) is not None


    def ntriples_string(self):
        return '<{}>'.format(self._iri_string)


    def __eq__(self, other):
        if not isinstance(other, IRI):
            return NotImplemented
        return self._iri_string == other._iri_string


    def __hash__(self):
        return hash(self._iri_string)


    def __reduce__(self):
        return (self.__class__, (self._iri_string,))


    def __repr__(self):
        return 'IRI({!r})'.format(self._iri_string)



class BlankNode(RDFTerm):
    """
    Blank node.

    A blank node is identified by its unique reference, which is opaque and
    never derived from a user-supplied name. Blank nodes are equal if and only
    if their unique references are equal.

    Blank nodes are normally minted by a factory, which keeps named nodes
    consistent within its own scope. A blank node created directly without a
    reference gets a fresh, globally unique one.
    """
    __slots__ = ('_unique_reference', '_name')

    def __init__(self, unique_reference=None, name=None):
        """
        :param str unique_reference: Identity key of the node. If omitted,
            a random one is generated. Must be a valid N-Triples blank node
            label: ASCII letters, digits, ``_``, ``-`` and ``.``, not starting with
            ``-`` or ``.`` and not ending with ``.``.
        :param str name: Name the node was requested with, if any. This is
            informational and does not participate in equality.
        """
        if unique_reference is None:
            unique_reference = uuid4().hex
        elif not isinstance(unique_reference, str):
            raise InvalidArgumentError(
                    unique_reference,
                    'Blank node reference must be a non-empty string.')
        elif not BNODE_LABEL.fullmatch(unique_reference):
            logger.debug('Rejecting blank node reference: {!r}'.format(
                    unique_reference))
            raise InvalidArgumentError(
                    unique_reference,
                    '{!r} is not a valid blank node label.'.format(
                        unique_reference))

        object.__setattr__(self, '_unique_reference', unique_reference)
        object.__setattr__(self, '_name', name)


    @property
    def unique_reference(self):
        """
        Opaque identity key.

        :rtype: str
        """
        return self._unique_reference


    @property
    def name(self):
        """
        Name passed to the factory when the node was created, or ``None``.

        :rtype: str or None
        """
        return self._name


    def ntriples_string(self):
        return '_:{}'.format(self._unique_reference)


    def __eq__(self, other):
        if not isinstance(other, BlankNode):
            return NotImplemented
        return self._unique_reference == other._unique_reference


    def __hash__(self):
        return hash(self._unique_reference)


    def __reduce__(self):
        return (self.__class__, (self._unique_reference, self._name))


    def __repr__(self):
        return 'BlankNode({!r})'.format(self._unique_reference)



XSD_STRING_IRI = IRI(XSD_STRING)
RDF_LANG_STRING_IRI = IRI(RDF_LANG_STRING)


class Literal(RDFTerm):
    """
    RDF literal.

    A literal has a lexical form, a datatype and, only if the datatype is
    ``rdf:langString``, a language tag. Two literals are equal if all three
    are equal. Lexical forms are never normalized.
    """
    __slots__ = ('_lexical_form', '_datatype', '_language_tag')

    def __init__(self, lexical_form, datatype=None, language_tag=None):
        """
        Create a literal.

        :param str lexical_form: Lexical form.
        :param IRI datatype: Datatype. Defaults to ``xsd:string``. Ignored
            if ``language_tag`` is given.
        :param str language_tag: Language tag. If given, the datatype is
            ``rdf:langString``.

        :raise InvalidArgumentError: if the language tag is malformed, or if
            ``rdf:langString`` is requested without a language tag.
        """
        if not isinstance(lexical_form, str):
            raise TypeError(
                    'Lexical form must be a str, not {}.'.format(
                    type(lexical_form).__name__))

        if language_tag is not None:
            if not isinstance(language_tag, str) or not LANG_TAG.fullmatch(
                    language_tag):
                logger.debug('Rejecting language tag: {!r}'.format(
                        language_tag))
                raise InvalidArgumentError(
                        language_tag,
                        '{!r} is not a valid language tag.'.format(
                            language_tag))
            datatype = RDF_LANG_STRING_IRI
        elif datatype is None:
            datatype = XSD_STRING_IRI
        elif not isinstance(datatype, IRI):
            raise TypeError(
                    'Literal datatype must be an IRI, not {}.'.format(
                    type(datatype).__name__))
        elif datatype == RDF_LANG_STRING_IRI:
            raise InvalidArgumentError(
                    datatype,
                    'A literal with datatype rdf:langString must have a '
                    'language tag.')

        object.__setattr__(self, '_lexical_form', lexical_form)
        object.__setattr__(self, '_datatype', datatype)
        object.__setattr__(self, '_language_tag', language_tag)


    @property
    def lexical_form(self):
        """
        :rtype: str
        """
        return self._lexical_form


    @property
    def datatype(self):
        """
        :rtype: IRI
        """
        return self._datatype


    @property
    def language_tag(self):
        """
        Language tag, or ``None`` if the literal is not language-tagged.

        :rtype: str or None
        """
        return self._language_tag


    def ntriples_string(self):
        quoted = '"{}"'.format(self._lexical_form.translate(_LITERAL_ESCAPES))
        if self._language_tag is not None:
            return '{}@{}'.format(quoted, self._language_tag)
        if self._datatype == XSD_STRING_IRI:
            return quoted
        return '{}^^{}'.format(quoted, self._datatype.ntriples_string())


    def __eq__(self, other):
        if not isinstance(other, Literal):
            return NotImplemented
        return (
            self._lexical_form == other._lexical_form
            and self._datatype == other._datatype
            and self._language_tag == other._language_tag)


    def __hash__(self):
        return hash((self._lexical_form, self._datatype, self._language_tag))


    def __reduce__(self):
        if self._language_tag is not None:
            return (self.__class__, (
                self._lexical_form, None, self._language_tag))
        return (self.__class__, (self._lexical_form, self._datatype))


    def __repr__(self):
        if self._language_tag is not None:
            return 'Literal({!r}, language_tag={!r})'.format(
                    self._lexical_form, self._language_tag)
        return 'Literal({!r}, datatype={!r})'.format(
                self._lexical_form, self._datatype)
