from operator import itemgetter

from simplerdf.model.rdf.term import IRI, BlankNode, RDFTerm


class Triple(tuple):
    """
    RDF triple.

    A triple is an immutable ``(subject, predicate, object)`` tuple whose
    members are validated on construction: the subject must be an IRI or a
    blank node, the predicate an IRI and the object any RDF term.

    Being a tuple, a triple compares and hashes componentwise, can be
    unpacked and is equal to a plain tuple with the same terms::

        >>> s, p, o = trp
        >>> trp == (s, p, o)
        True

    Blank nodes are kept as they are: constructing a triple never re-scopes
    them.
    """
    __slots__ = ()

    def __new__(cls, s, p, o):
        if not isinstance(s, (IRI, BlankNode)):
            raise TypeError(
                    'Triple subject must be an IRI or a blank node, not '
                    '{}.'.format(type(s).__name__))
        if not isinstance(p, IRI):
            raise TypeError(
                    'Triple predicate must be an IRI, not {}.'.format(
                    type(p).__name__))
        if not isinstance(o, RDFTerm):
            raise TypeError(
                    'Triple object must be an RDF term, not {}.'.format(
                    type(o).__name__))

        return super().__new__(cls, (s, p, o))


    def __getnewargs__(self):
        return tuple(self)


    subject = property(itemgetter(0), doc='Subject (IRI or BlankNode).')
    predicate = property(itemgetter(1), doc='Predicate (IRI).')
    object = property(itemgetter(2), doc='Object (any RDF term).')


    def ntriples_string(self):
        """
        Triple as one N-Triples statement, without a line terminator.

        :rtype: str
        """
        return '{} {} {} .'.format(*(t.ntriples_string() for t in self))


    def __str__(self):
        return self.ntriples_string()


    def __repr__(self):
        return 'Triple({!r}, {!r}, {!r})'.format(*self)
