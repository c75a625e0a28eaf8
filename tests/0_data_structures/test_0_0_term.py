import pytest

from simplerdf.exceptions import InvalidArgumentError, InvalidTermError
from simplerdf.model.rdf.term import (
        IRI, BlankNode, Literal, RDFTerm, RDF_LANG_STRING_IRI, XSD_STRING_IRI)


XSD_DATETIME = 'http://www.w3.org/2001/XMLSchema#dateTime'


class TestIri:
    """
    Test IRI creation, equality and canonical form.
    """
    def test_canonical_form(self):
        iri = IRI('http://example.com/vocab#term')

        assert iri.iri_string == 'http://example.com/vocab#term'
        assert iri.ntriples_string() == '<http://example.com/vocab#term>'
        assert str(iri) == '<http://example.com/vocab#term>'


    @pytest.mark.parametrize('iri_string', (
        'http://accént.example.com/première',
        'http://example.испытание/Кириллица',
        'http://𐐀.example.com/𐐀',
    ))
    def test_international(self, iri_string):
        """
        Non-ASCII characters are kept as they are.
        """
        iri = IRI(iri_string)

        assert iri.iri_string == iri_string
        assert iri.ntriples_string() == '<{}>'.format(iri_string)


    def test_equality(self):
        assert IRI('http://example.com/') == IRI('http://example.com/')
        assert IRI('http://example.com/') != IRI('http://example.com')
        # No case normalization.
        assert IRI('http://example.com/a') != IRI('http://EXAMPLE.com/a')
        assert IRI('http://example.com/') != 'http://example.com/'


    def test_hash(self):
        iri = IRI('http://example.com/')

        assert hash(iri) == hash('http://example.com/')
        assert len({iri, IRI('http://example.com/')}) == 1


    @pytest.mark.parametrize('iri_string', (
        '<no_brackets>',
        'http://example.com/with space',
        'http://example.com/with\nnewline',
        'http://example.com/"quote"',
        'http://example.com/{brace}',
        'http://example.com/back\\slash',
    ))
    def test_invalid(self, iri_string):
        with pytest.raises(InvalidTermError):
            IRI(iri_string)


    def test_invalid_is_invalid_argument(self):
        """
        Invalid IRIs can be caught as invalid arguments or value errors.
        """
        with pytest.raises(InvalidArgumentError):
            IRI('<no_brackets>')
        with pytest.raises(ValueError):
            IRI('<no_brackets>')


    def test_not_a_string(self):
        with pytest.raises(TypeError):
            IRI(1234)


    def test_relative(self):
        rel = IRI('../relative#term')

        assert rel.iri_string == '../relative#term'
        assert rel.ntriples_string() == '<../relative#term>'
        assert not rel.is_absolute()
        assert IRI('').ntriples_string() == '<>'
        assert IRI('urn:x:1').is_absolute()


    def test_relative_rejected(self):
        with pytest.raises(InvalidTermError):
            IRI('../relative', allow_relative=False)
        with pytest.raises(InvalidTermError):
            IRI('', allow_relative=False)

        assert IRI('urn:x:1', allow_relative=False).iri_string == 'urn:x:1'



class TestBlankNode:
    """
    Test blank node identity.
    """
    def test_fresh(self):
        bn1 = BlankNode()
        bn2 = BlankNode()

        assert bn1 != bn2
        assert bn1.unique_reference != bn2.unique_reference
        assert bn1.name is None


    def test_equality(self):
        bn1 = BlankNode('abc123', name='b1')
        bn2 = BlankNode('abc123', name='other')

        # The name is informational only.
        assert bn1 == bn2
        assert bn1 != BlankNode('abc124')
        assert bn1 != IRI('abc123')


    def test_hash(self):
        bn = BlankNode()

        assert hash(bn) == hash(bn.unique_reference)


    def test_canonical_form(self):
        bn = BlankNode('abc123')

        assert bn.ntriples_string() == '_:abc123'


    def test_empty_reference(self):
        with pytest.raises(InvalidArgumentError):
            BlankNode('')


    @pytest.mark.parametrize('ref', (
        'with:colon', 'with space', '-leading', '.leading', 'trailing.',
        'a>b', 'ünï'))
    def test_invalid_label(self, ref):
        """
        References that would not render as a valid N-Triples label.
        """
        with pytest.raises(InvalidArgumentError):
            BlankNode(ref)


    @pytest.mark.parametrize('ref', ('b1', '_x', 'a.b', 'a-b', '0', 'x-'))
    def test_valid_label(self, ref):
        assert BlankNode(ref).ntriples_string() == '_:' + ref



class TestLiteral:
    """
    Test literal construction and canonical form.
    """
    def test_plain(self):
        lit = Literal('Example')

        assert lit.lexical_form == 'Example'
        assert lit.language_tag is None
        assert lit.datatype == XSD_STRING_IRI
        assert lit.datatype.iri_string == (
                'http://www.w3.org/2001/XMLSchema#string')
        assert lit.ntriples_string() == '"Example"'


    def test_explicit_string_datatype(self):
        lit = Literal('Example', IRI(
            'http://www.w3.org/2001/XMLSchema#string'))

        assert lit == Literal('Example')
        assert lit.ntriples_string() == '"Example"'


    def test_typed(self):
        lit = Literal('2014-12-27T00:50:00T-0600', IRI(XSD_DATETIME))

        assert lit.language_tag is None
        assert lit.datatype.iri_string == XSD_DATETIME
        assert lit.ntriples_string() == (
                '"2014-12-27T00:50:00T-0600"'
                '^^<http://www.w3.org/2001/XMLSchema#dateTime>')


    def test_lang(self):
        lit = Literal('Example', language_tag='en')

        assert lit.language_tag == 'en'
        assert lit.datatype == RDF_LANG_STRING_IRI
        assert lit.datatype.iri_string == (
                'http://www.w3.org/1999/02/22-rdf-syntax-ns#langString')
        assert lit.ntriples_string() == '"Example"@en'


    @pytest.mark.parametrize('tag', ('vls', 'en-US', 'zh-Hant-TW', 'de-1996'))
    def test_lang_valid(self, tag):
        lit = Literal('Herbert Van de Sompel', language_tag=tag)

        assert lit.language_tag == tag
        assert lit.ntriples_string() == '"Herbert Van de Sompel"@{}'.format(
                tag)


    @pytest.mark.parametrize('tag', ('with space', '', 'en_US', '-en', 'en-'))
    def test_lang_invalid(self, tag):
        with pytest.raises(InvalidArgumentError):
            Literal('Example', language_tag=tag)


    def test_lang_overrides_datatype(self):
        lit = Literal('Example', IRI(XSD_DATETIME), 'en')

        assert lit.datatype == RDF_LANG_STRING_IRI


    def test_lang_string_without_tag(self):
        with pytest.raises(InvalidArgumentError):
            Literal('Example', RDF_LANG_STRING_IRI)


    def test_datatype_not_iri(self):
        with pytest.raises(TypeError):
            Literal('Example', XSD_DATETIME)


    def test_escape(self):
        lit = Literal('say "hi"\\\nbye\r')

        assert lit.ntriples_string() == '"say \\"hi\\"\\\\\\nbye\\r"'


    def test_equality(self):
        assert Literal('1', IRI(XSD_DATETIME)) == Literal('1', IRI(XSD_DATETIME))
        assert Literal('Example') != Literal('Example', language_tag='en')
        assert (
                Literal('Example', language_tag='en') !=
                Literal('Example', language_tag='EN'))
        assert Literal('Example') != IRI('Example')


    def test_hash(self):
        lit = Literal('Hello', language_tag='en')

        assert hash(lit) == hash(
                (lit.lexical_form, lit.datatype, lit.language_tag))



class TestTermModel:
    """
    Test properties shared by all terms.
    """
    @pytest.mark.parametrize('term', (
        IRI('http://example.com/'), BlankNode(), Literal('Example')))
    def test_immutable(self, term):
        assert isinstance(term, RDFTerm)
        with pytest.raises(AttributeError):
            term.foo = 'bar'
        with pytest.raises(AttributeError):
            term._datatype = None


    def test_closed_kinds(self):
        with pytest.raises(TypeError):
            class Variable(RDFTerm):
                pass
