import logging

from threading import RLock

from simplerdf.model.rdf.triple import Triple

__doc__ = """
In-memory RDF graph.

A :py:class:`Graph` is a mutable set of :py:class:`~simplerdf.model.rdf.triple.Triple`
instances. Adding a triple that is already present is a no-op.

Graphs support the Python set operators, which return new graphs::

    >>> gr3 = gr1 | gr2     # union; ``gr1 + gr2`` is the same
    >>> gr3 = gr1 & gr2     # intersection
    >>> gr3 = gr1 - gr2     # difference
    >>> gr3 = gr1 ^ gr2     # symmetric difference

and their in-place versions (``|=``, ``+=``, ``&=``, ``-=``, ``^=``).
"""

logger = logging.getLogger(__name__)


class Graph:
    """
    Mutable, set-like container of triples.

    Mutating methods are serialized by a per-instance lock. Lookups and
    iteration work on a snapshot of the triple set, so a graph can be
    modified while iterating over it.
    """
    def __init__(self, data=None, factory=None):
        """
        Initialize the graph.

        :param data: Initial triples. Each item can be a
            :py:class:`~simplerdf.model.rdf.triple.Triple` or a
            ``(s, p, o)`` tuple of RDF terms.
        :type data: iterable or None
        :param factory: Factory used to build triples added as separate
            terms. If omitted, triples are built directly.
        :type factory: :py:class:`~simplerdf.model.rdf_factory.SimpleRDF`
        """
        self._factory = factory
        self._lock = RLock()
        self._triples = set()

        if data is not None:
            self.update(data)


    @property
    def factory(self):
        """
        Factory this graph builds triples with, or ``None``.
        """
        return self._factory


    ## Mutators.

    def add(self, *terms):
        """
        Add a triple.

        The triple can be given either as a single argument::

            >>> gr.add(trp)

        or as three terms::

            >>> gr.add(s, p, o)

        Adding a triple that is already in the graph does nothing.

        :raise TypeError: if the terms do not form a valid triple.
        """
        trp = self._build_triple(terms)
        with self._lock:
            self._triples.add(trp)


    def update(self, triples):
        """
        Add many triples at once.

        :param triples: Iterable of triples or ``(s, p, o)`` tuples.
        """
        new_triples = {self._build_triple((trp,)) for trp in triples}
        with self._lock:
            self._triples |= new_triples


    def remove(self, s=None, p=None, o=None):
        """
        Remove triples.

        This accepts either a triple as the only argument, or a pattern of
        terms in which ``None`` matches any term. Removing a triple that is
        not in the graph does nothing.
        """
        if isinstance(s, tuple):
            s, p, o = s

        with self._lock:
            if s is not None and p is not None and o is not None:
                self._triples.discard((s, p, o))
            else:
                self._triples -= set(self._lookup(self._triples, s, p, o))


    def clear(self):
        """
        Remove all triples.
        """
        with self._lock:
            self._triples.clear()


    ## Lookups.

    def size(self):
        """
        Number of distinct triples.

        :rtype: int
        """
        return len(self._triples)


    def contains(self, s=None, p=None, o=None):
        """
        Whether the graph contains a triple or a triple matching a pattern.

        This accepts either a triple as the only argument, or a pattern of
        terms in which ``None`` matches any term.

        :rtype: bool
        """
        if isinstance(s, tuple):
            s, p, o = s

        if s is not None and p is not None and o is not None:
            return (s, p, o) in self._triples

        for _ in self.iter_triples(s, p, o):
            return True
        return False


    def iter_triples(self, s=None, p=None, o=None):
        """
        Iterate over the triples matching a pattern.

        ``None`` in any position matches any term.

        :rtype: Iterator(Triple)
        """
        return self._lookup(self._snapshot(), s, p, o)


    ## Magic methods.

    def __len__(self):
        return self.size()


    def __iter__(self):
        return self.iter_triples()


    def __contains__(self, trp):
        return trp in self._triples


    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self._snapshot() == other._snapshot()


    __hash__ = None


    def __repr__(self):
        return '<{}: {} triples>'.format(
                self.__class__.__name__, len(self))


    def __str__(self):
        return '\n'.join(sorted(trp.ntriples_string() for trp in self))


    ## Set operations.

    def __or__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self._derive(self._snapshot() | other._snapshot())

    __add__ = __or__


    def __and__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self._derive(self._snapshot() & other._snapshot())


    def __sub__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self._derive(self._snapshot() - other._snapshot())


    def __xor__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self._derive(self._snapshot() ^ other._snapshot())


    def __ior__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        triples = other._snapshot()
        with self._lock:
            self._triples |= triples
        return self

    __iadd__ = __ior__


    def __iand__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        triples = other._snapshot()
        with self._lock:
            self._triples &= triples
        return self


    def __isub__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        triples = other._snapshot()
        with self._lock:
            self._triples -= triples
        return self


    def __ixor__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        triples = other._snapshot()
        with self._lock:
            self._triples ^= triples
        return self


    ## Private methods.

    def _snapshot(self):
        """
        Copy of the current triple set, taken under the lock.

        The lock of the other graph in a set operation is never held together
        with this one.

        :rtype: frozenset
        """
        with self._lock:
            return frozenset(self._triples)


    def _build_triple(self, terms):
        """
        Build a triple from the arguments of :py:meth:`add`.
        """
        if len(terms) == 1:
            if isinstance(terms[0], Triple):
                return terms[0]
            if isinstance(terms[0], tuple) and len(terms[0]) == 3:
                terms = terms[0]
            else:
                raise TypeError(
                        'Expected a triple, got {!r}.'.format(terms[0]))
        elif len(terms) != 3:
            raise TypeError(
                    'Expected a triple or three terms, got {} arguments.'
                    .format(len(terms)))

        if self._factory is not None:
            return self._factory.create_triple(*terms)
        return Triple(*terms)


    def _derive(self, triples):
        """
        New graph sharing this graph's factory.
        """
        logger.debug('Deriving graph with {} triples.'.format(len(triples)))
        gr = self.__class__(factory=self._factory)
        gr._triples = set(triples)

        return gr


    @staticmethod
    def _lookup(triples, s, p, o):
        """
        Generate the triples in a collection that match a pattern.
        """
        for trp in triples:
            if (
                    (s is None or trp[0] == s)
                    and (p is None or trp[1] == p)
                    and (o is None or trp[2] == o)):
                yield trp
