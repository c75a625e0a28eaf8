import logging

from copy import deepcopy
from functools import lru_cache
from os import environ, path

import yaml

import simplerdf

logger = logging.getLogger(__name__)

default_config_dir = environ.get(
        'SIMPLERDF_CONFIG_DIR', path.join(simplerdf.basedir, 'etc.defaults'))
"""
Default configuration directory.

This value falls back to the provided ``etc.defaults`` directory if the
``SIMPLERDF_CONFIG_DIR`` environment variable is not set.

This value can still be overridden by custom applications by passing the
``config_dir`` value to :func:`parse_config` explicitly.
"""

core_config_dir = path.join(simplerdf.basedir, 'etc.defaults')


def parse_config(config_dir=None):
    """
    Parse configuration from a directory.

    This is normally called by the ``rdf-admin`` command or by a Python client
    by calling :py:meth:`simplerdf.env.setup()`, but an application using a
    non-default configuration may specify an alternative configuration
    directory.

    The directory must have the same structure as the one provided in
    ``etc.defaults``. Options missing from a custom ``application.yml`` are
    filled in from the stock one.

    :param config_dir: Location on the filesystem of the configuration
        directory. The default is set by the ``SIMPLERDF_CONFIG_DIR``
        environment variable or, if this is not set, the ``etc.defaults``
        stock directory.

    :rtype: dict
    """
    configs = (
        'application',
        'logging',
    )

    if not config_dir:
        config_dir = default_config_dir

    # This will hold a dict of all configuration values.
    _config = {}

    logger.info(f'Reading configuration at {config_dir}')

    for cname in configs:
        fname = path.join(config_dir, f'{cname}.yml')
        with open(fname, 'r') as fh:
            _config[cname] = yaml.load(fh, yaml.SafeLoader) or {}

    # Merge custom application options over the core ones.
    _config['application'] = merge_app_config(_config['application'])

    logger.debug('Relative IRIs allowed: {}'.format(
        _config['application']['iri']['allow_relative']))

    return _config


@lru_cache(maxsize=None)
def _stock_app_config():
    """
    Stock application configuration, read from disk only once.
    """
    with open(path.join(core_config_dir, 'application.yml')) as fh:
        return yaml.load(fh, yaml.SafeLoader)


def merge_app_config(options=None):
    """
    Merge application options over the stock ones.

    Sections and options missing from ``options`` are filled in from the
    stock ``application.yml``. The returned dict is a new copy that can be
    modified freely.

    :param dict options: Application options, with the same structure as
        ``application.yml``. May be partial.

    :rtype: dict
    """
    app_config = deepcopy(_stock_app_config())
    for section, section_opts in (options or {}).items():
        app_config.setdefault(section, {}).update(section_opts or {})

    return app_config


def default_app_config():
    """
    Application configuration in effect for a factory without explicit
    options.

    This is the ``application`` section of the environment set up with
    :py:meth:`simplerdf.env.setup()` or, if the environment is not set up,
    the stock configuration.

    :rtype: dict
    """
    if hasattr(simplerdf.env, 'app_globals'):
        return merge_app_config(
                simplerdf.env.app_globals.config.get('application'))

    return merge_app_config()
