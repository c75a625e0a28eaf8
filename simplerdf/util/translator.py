import logging

import rdflib

from rdflib.term import BNode, URIRef

from simplerdf.dictionaries.namespaces import XSD_STRING
from simplerdf.model.rdf.term import IRI, BlankNode, Literal
from simplerdf.model.rdf.triple import Triple

__doc__ = '''
Utilities to translate simplerdf terms, triples and graphs to and from
their rdflib counterparts.

This allows to use the rdflib parsers and serializers with simplerdf data.
Lexical forms are never normalized in either direction.
'''

logger = logging.getLogger(__name__)


def to_rdflib(term):
    '''
    Convert a term or a triple into an rdflib term or a tuple of terms.

    Blank nodes are converted to rdflib blank nodes with the unique
    reference as their identifier. ``xsd:string`` literals are converted to
    rdflib literals without a datatype.

    :param term: simplerdf term or triple.

    :rtype: rdflib.term.Identifier or tuple
    '''
    if isinstance(term, Triple):
        return tuple(to_rdflib(t) for t in term)
    if isinstance(term, IRI):
        return URIRef(term.iri_string)
    if isinstance(term, BlankNode):
        return BNode(term.unique_reference)
    if isinstance(term, Literal):
        if term.language_tag is not None:
            return rdflib.Literal(
                    term.lexical_form, lang=term.language_tag,
                    normalize=False)
        if term.datatype.iri_string == XSD_STRING:
            return rdflib.Literal(term.lexical_form, normalize=False)
        return rdflib.Literal(
                term.lexical_form, datatype=URIRef(term.datatype.iri_string),
                normalize=False)

    raise TypeError('Cannot convert {!r} to an rdflib term.'.format(term))


def from_rdflib(node, factory):
    '''
    Convert an rdflib term or triple into a simplerdf one.

    rdflib blank nodes become blank nodes named after their identifier in
    the scope of ``factory``, so that the same rdflib blank node always
    converts to the same node when the same factory is used.

    :param node: rdflib term, or tuple of three terms.
    :param factory: Factory used to create the terms.
    :type factory: :py:class:`~simplerdf.model.rdf_factory.SimpleRDF`

    :rtype: simplerdf term or Triple.
    '''
    if isinstance(node, tuple):
        return factory.create_triple(*(from_rdflib(n, factory) for n in node))
    if isinstance(node, URIRef):
        return factory.create_iri(str(node))
    if isinstance(node, BNode):
        return factory.create_blank_node(str(node))
    if isinstance(node, rdflib.Literal):
        if node.language:
            return factory.create_literal(str(node), lang=node.language)
        if node.datatype is None:
            return factory.create_literal(str(node))
        return factory.create_literal(
                str(node), factory.create_iri(str(node.datatype)))

    raise TypeError('Cannot convert {!r} to a simplerdf term.'.format(node))


def graph_to_rdflib(graph, identifier=None):
    '''
    Copy a graph into a new rdflib graph.

    :param Graph graph: Source graph.
    :param identifier: Identifier of the new rdflib graph.

    :rtype: rdflib.Graph
    '''
    rdf_gr = rdflib.Graph(identifier=identifier)
    for trp in graph:
        rdf_gr.add(to_rdflib(trp))
    logger.debug('Converted {} triples to rdflib.'.format(len(rdf_gr)))

    return rdf_gr


def graph_from_rdflib(rdf_graph, factory):
    '''
    Copy an rdflib graph into a new graph created by ``factory``.

    :param rdflib.Graph rdf_graph: Source graph.
    :param factory: Factory used to create the terms and the graph.

    :rtype: Graph
    '''
    gr = factory.create_graph()
    gr.update(from_rdflib(trp, factory) for trp in rdf_graph)
    logger.debug('Converted {} triples from rdflib.'.format(len(gr)))

    return gr
