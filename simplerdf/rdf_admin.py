import click
import click_log
import logging

from logging.config import dictConfig

from simplerdf.config_parser import parse_config
from simplerdf.exceptions import SimpleRdfError
from simplerdf.model.rdf_factory import SimpleRDF

__doc__="""
Utility to inspect the canonical form of RDF terms via console command-line.

The command-line tool is self-documented. Type::

    rdf-admin --help

for a list of tools and options.
"""

logger = logging.getLogger(__name__)
click_log.basic_config(logger)


@click.group()
@click.option(
    '--config-folder', '-c', default=None, help='Alternative configuration '
    'folder to look up. If not set, the location set in the environment or '
    'the default configuration is used.')
@click_log.simple_verbosity_option(logger)
@click.pass_context
def admin(ctx, config_folder=None):
    """
    Create RDF terms and print them in N-Triples format.

    All terms created by one invocation share the same factory.
    """
    config = parse_config(config_folder)
    dictConfig(config['logging'])
    ctx.obj = SimpleRDF(config['application'])


@click.command()
@click.argument('iri_string')
@click.pass_obj
def iri(rdf, iri_string):
    """
    Print the canonical form of an IRI.
    """
    try:
        click.echo(rdf.create_iri(iri_string).ntriples_string())
    except SimpleRdfError as e:
        raise click.ClickException(str(e))


@click.command()
@click.argument('lexical_form')
@click.option(
    '--lang', '-l', default=None, help='Language tag. If set, the datatype '
    'is always `rdf:langString`.')
@click.option(
    '--datatype', '-d', default=None, help='Datatype IRI. Ignored if '
    '`--lang` is set. The default is `xsd:string`.')
@click.pass_obj
def literal(rdf, lexical_form, lang=None, datatype=None):
    """
    Print the canonical form of a literal.
    """
    try:
        if lang is None and datatype is not None:
            lit = rdf.create_literal(lexical_form, rdf.create_iri(datatype))
        else:
            lit = rdf.create_literal(lexical_form, lang=lang)
        click.echo(lit.ntriples_string())
    except SimpleRdfError as e:
        raise click.ClickException(str(e))


@click.command()
@click.argument('names', nargs=-1)
@click.pass_obj
def bnode(rdf, names):
    """
    Print the canonical form of blank nodes.

    One line is printed for each name. Repeated names print the same label.
    Without names, one new anonymous blank node is printed.
    """
    try:
        if not names:
            click.echo(rdf.create_blank_node().ntriples_string())
        for name in names:
            bn = rdf.create_blank_node(name)
            logger.debug('Blank node {!r}: {}'.format(
                    name, bn.unique_reference))
            click.echo(bn.ntriples_string())
    except SimpleRdfError as e:
        raise click.ClickException(str(e))


admin.add_command(iri)
admin.add_command(literal)
admin.add_command(bnode)

if __name__ == '__main__':
    admin()
