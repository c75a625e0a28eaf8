import logging

from os import path


logger = logging.getLogger(__name__)

version = '0.3'
release = '0.3.0'

basedir = path.dirname(path.realpath(__file__))
"""
Base directory for the module.

This can be used by modules looking for configuration and data files to be
referenced with a known path relative to the package root.

:rtype: str
"""

class Env:
    """
    simplerdf environment.

    Instances of this class hold the configuration shared by the factories
    created in a Python environment that do not receive an explicit
    configuration.
    """

    def setup(self, config_dir=None, config=None):
        """
        Set the environment up.

        This is optional. Factories created before this is called, or without
        calling it at all, use the packaged default configuration.

        This method will warn and not do anything if it has already been
        called in the same runtime environment.

        :param str config_dir: Path to a directory containing the
            configuration ``.yml`` files. If this and ``config`` are omitted,
            the configuration files are read from the default directory defined
            in :py:meth:`~simplerdf.config_parser.parse_config()`.

        :param dict config: Fully-formed configuration as a dictionary. If
            this is provided, ``config_dir`` is ignored. This is useful to
            call ``parse_config()`` separately and modify the configuration
            manually before passing it to the setup.
        """
        if hasattr(self, 'app_globals'):
            logger.warning('The environment is already set up.')
            return

        if not config:
            from .config_parser import parse_config
            config = parse_config(config_dir)

        self.app_globals = _AppGlobals(config)


    def teardown(self):
        """
        Discard the environment set up by :py:meth:`setup`.

        Mostly useful in test suites that need to set up different
        configurations in the same process.
        """
        if hasattr(self, 'app_globals'):
            del self.app_globals


env = Env()
"""
Object for storing global variables.

e.g.::

    >>> from simplerdf import env
    >>> env.setup()

Or, with a custom configuration directory::

    >>> from simplerdf import env
    >>> env.setup('/my/config/dir')

Or, to load a configuration and modify it before setting up the environment::

    >>> from simplerdf import env
    >>> from simplerdf.config_parser import parse_config
    >>> config = parse_config(config_dir)
    >>> config['application']['iri']['allow_relative'] = False
    >>> env.setup(config=config)

:rtype: Object
"""


## Private members. Nothing interesting here.

class _AppGlobals:
    """
    Application Globals.

    This class is instantiated and used as a carrier for the configuration
    shared by all the factories of a runtime environment.

    :see_also: simplerdf.env.setup()
    """
    def __init__(self, config):
        self._config = config


    @property
    def config(self):
        """
        Global configuration.

        This is a dict with one key per configuration file, i.e.
        ``application`` and ``logging``.
        """
        return self._config
