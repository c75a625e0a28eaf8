__doc__ = """
Model for RDF entities: Term, Triple, Graph.

Members of this package are the core building blocks of the simplerdf RDF
model. Terms and triples are immutable values that can be shared freely
between graphs and threads; graphs are mutable containers of triples.

Terms are normally created through a factory
(:py:class:`~simplerdf.model.rdf_factory.SimpleRDF`), which owns the
blank node naming scope and applies the configured validation policies.

See individual modules for detailed documentation:

- :py:mod:`simplerdf.model.rdf.term`
- :py:mod:`simplerdf.model.rdf.triple`
- :py:mod:`simplerdf.model.rdf.graph`

"""
