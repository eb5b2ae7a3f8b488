''' Client configuration: where the lircd socket is and which remote to use.

The configuration is a plain value handed to LircClient. Helpers here
build it from the lircd options file, a small YAML file or, for command
line tools, the LIRC_SOCKET_PATH environment variable.

A YAML configuration file looks like:

    socket_path: /var/run/lirc/lircd
    remote: mceusb
    timeout: 5
'''

import collections
import configparser
import os

import yaml

from .exceptions import ConfigError

DEFAULT_SOCKET_PATH = '/var/run/lirc/lircd'
OPTIONS_PATH = '/etc/lirc/lirc_options.conf'

_KEYS = ('socket_path', 'remote', 'timeout')

_Config = collections.namedtuple('_Config', _KEYS)


class ClientConfig(_Config):
    ''' Immutable client configuration.

    socket_path: The lircd socket.
    remote:      Remote to select when connecting, None for the first one.
    timeout:     Read timeout in seconds, None blocks forever.
    '''

    __slots__ = ()

    def __new__(cls, socket_path=DEFAULT_SOCKET_PATH, remote=None,
                timeout=None):
        if timeout is not None:
            try:
                timeout = float(timeout)
            except (TypeError, ValueError):
                raise ConfigError('Bad timeout: %r' % (timeout,)) from None
            if timeout <= 0:
                raise ConfigError('Timeout must be positive: %s' % timeout)
        return super().__new__(cls, socket_path, remote, timeout)

    @classmethod
    def from_options(cls, path=OPTIONS_PATH, **kwargs):
        ''' Use the lircd socket named by the output option in the
        [lircd] section of the lircd options file, if any.
        '''
        return cls(_options_socket_path(path), **kwargs)

    @classmethod
    def load(cls, path):
        ''' Read a YAML configuration file. '''
        try:
            with open(path) as f:
                cf = yaml.safe_load(f.read())
        except OSError as ex:
            raise ConfigError('Cannot read %s: %s' % (path, ex)) from ex
        except yaml.YAMLError as ex:
            raise ConfigError('Cannot parse %s: %s' % (path, ex)) from ex
        if cf is None:
            cf = {}
        if not isinstance(cf, dict):
            raise ConfigError('%s: expected a mapping' % path)
        unknown = set(cf) - set(_KEYS)
        if unknown:
            raise ConfigError(
                '%s: unknown keys: %s' % (path, ', '.join(sorted(unknown))))
        return cls(**cf)


def _options_socket_path(path):
    ''' Return the [lircd] output option in path, else the default. '''
    parser = configparser.ConfigParser()
    try:
        parser.read(path)
    except configparser.Error as ex:
        raise ConfigError('Cannot parse %s: %s' % (path, ex)) from ex
    return parser.get('lircd', 'output', fallback=DEFAULT_SOCKET_PATH)


def get_default_socket_path(environ=None, options_path=OPTIONS_PATH):
    ''' Return the lircd socket path used by command line tools:
    LIRC_SOCKET_PATH if set in environ, else the lircd options file, else
    the compiled default.
    '''
    if environ is None:
        environ = os.environ
    if environ.get('LIRC_SOCKET_PATH'):
        return environ['LIRC_SOCKET_PATH']
    return _options_socket_path(options_path)


# vim: set expandtab ts=4 sw=4:
