import logging
import pytest

from simplerdf import env
from simplerdf.model.rdf_factory import SimpleRDF


@pytest.fixture
def rdf():
    '''
    Factory with the stock configuration.
    '''
    return SimpleRDF()


@pytest.fixture
def strict_rdf():
    '''
    Factory rejecting relative IRIs and blank node names with a colon.
    '''
    return SimpleRDF({
        'iri': {'allow_relative': False},
        'blank_node': {'reject_colon': True},
    })


@pytest.fixture
def clean_env():
    '''
    Make sure that the global environment is not set up before and after a
    test.
    '''
    env.teardown()
    yield env
    env.teardown()


@pytest.fixture(autouse=True)
def disable_logging():
    """Disable logging in all tests."""
    logging.disable(logging.WARNING)
