import logging

from threading import Lock
from uuid import uuid4

from simplerdf.config_parser import default_app_config, merge_app_config
from simplerdf.exceptions import InvalidArgumentError
from simplerdf.model.rdf.graph import Graph
from simplerdf.model.rdf.term import IRI, BlankNode, Literal
from simplerdf.model.rdf.triple import Triple


logger = logging.getLogger(__name__)


class SimpleRDF:
    """
    Generate RDF terms, triples and graphs.

    The factory is the only place where validation policies are applied,
    and it owns the naming scope of blank nodes: within one factory instance,
    the same blank node name always yields the same node; different factory
    instances never share names.

    All methods can be called concurrently from different threads.
    """
    def __init__(self, config=None):
        """
        Initialize the factory.

        :param dict config: Application configuration, with the same
            structure as ``application.yml``. If omitted, the configuration
            of the environment set up with :py:meth:`simplerdf.env.setup` is
            used or, failing that, the stock configuration. Options missing
            from a partial configuration take their stock values.
        """
        if config is None:
            config = default_app_config()
        else:
            config = merge_app_config(config)

        self._allow_relative = config['iri']['allow_relative']
        self._reject_colon = config['blank_node']['reject_colon']

        # Blank node name -> unique reference. Owned by this instance only.
        self._bnode_refs = {}
        self._bnode_lock = Lock()

        logger.debug(
                'New factory. Relative IRIs: {}; colon in blank node names: '
                '{}.'.format(
                    'allowed' if self._allow_relative else 'rejected',
                    'rejected' if self._reject_colon else 'allowed'))


    @property
    def allow_relative(self):
        """
        Whether this factory creates relative IRI references.

        :rtype: bool
        """
        return self._allow_relative


    def create_iri(self, iri_string):
        """
        Create an IRI.

        :param str iri_string: IRI reference.

        :rtype: :py:class:`~simplerdf.model.rdf.term.IRI`
        :raise InvalidTermError: if the string is not a valid IRI reference
            or if it is relative and relative IRIs are not allowed.
        """
        return IRI(iri_string, allow_relative=self._allow_relative)


    def create_blank_node(self, name=None):
        """
        Create a blank node.

        Without a name, a new blank node is created that is different from
        any other blank node created before, by this or any other factory.

        With a name, the first call mints a new node and further calls with
        the same name on the same factory return an equal node. The name is
        never used to build the node label.

        :param str name: Optional name of the blank node in the scope of this
            factory.

        :rtype: :py:class:`~simplerdf.model.rdf.term.BlankNode`
        :raise InvalidArgumentError: if the name is empty, or if it contains
            a colon and the factory is configured to reject those.
        """
        if name is None:
            return BlankNode()

        if not isinstance(name, str):
            raise TypeError(
                    'Blank node name must be a str, not {}.'.format(
                    type(name).__name__))
        if not name:
            raise InvalidArgumentError(
                    name, 'Blank node name cannot be empty.')
        if self._reject_colon and ':' in name:
            logger.debug('Rejecting blank node name: {!r}'.format(name))
            raise InvalidArgumentError(
                    name,
                    'Blank node name {!r} cannot contain a colon.'.format(name))

        with self._bnode_lock:
            ref = self._bnode_refs.get(name)
            if ref is None:
                ref = self._bnode_refs[name] = uuid4().hex

        return BlankNode(ref, name=name)


    def create_literal(self, lexical_form, datatype=None, lang=None):
        """
        Create a literal.

        The second argument can be either a datatype IRI or a language tag
        string::

            >>> rdf.create_literal('Example')
            >>> rdf.create_literal('Example', 'en')
            >>> rdf.create_literal('2014-12-27', rdf.create_iri(
            ...     'http://www.w3.org/2001/XMLSchema#date'))

        If a language tag is given, the datatype is always
        ``rdf:langString``.

        :param str lexical_form: Lexical form.
        :param datatype: Datatype IRI, or language tag.
        :type datatype: IRI or str
        :param str lang: Language tag.

        :rtype: :py:class:`~simplerdf.model.rdf.term.Literal`
        :raise InvalidArgumentError: if the language tag is malformed.
        """
        if isinstance(datatype, str):
            if lang is not None:
                raise TypeError(
                        'Language tag given twice: {!r} and {!r}.'.format(
                        datatype, lang))
            datatype, lang = None, datatype

        return Literal(lexical_form, datatype=datatype, language_tag=lang)


    def create_triple(self, s, p, o):
        """
        Create a triple.

        Blank nodes are used as they are. The triple is equal to any other
        triple with equal terms, regardless of the factory those were
        created with.

        :rtype: :py:class:`~simplerdf.model.rdf.triple.Triple`
        :raise TypeError: if the predicate is not an IRI, the subject is not
            an IRI or blank node, or the object is not an RDF term.
        """
        return Triple(s, p, o)


    def create_graph(self):
        """
        Create a new, empty graph.

        :rtype: :py:class:`~simplerdf.model.rdf.graph.Graph`
        """
        return Graph(factory=self)
