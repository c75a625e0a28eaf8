from rdflib.namespace import Namespace

ns_collection = {
    'rdf': Namespace('http://www.w3.org/1999/02/22-rdf-syntax-ns#'),
    'xsd': Namespace('http://www.w3.org/2001/XMLSchema#'),
}
"""
Vocabularies whose terms have a special meaning in the RDF data model.

Members are :py:class:`rdflib.namespace.Namespace` instances, i.e. plain
strings that generate full IRI strings by key access::

    >>> str(ns_collection['xsd']['string'])
    'http://www.w3.org/2001/XMLSchema#string'
"""

XSD_STRING = str(ns_collection['xsd']['string'])
"""Datatype of literals created without a datatype or language tag."""

RDF_LANG_STRING = str(ns_collection['rdf']['langString'])
"""Datatype of all language-tagged literals."""
