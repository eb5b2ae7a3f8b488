''' LircClient: a session with lircd for sending and receiving keys.

    with LircClient('mceusb') as client:
        client.send_key('KEY_POWER')
        client.wait_for_key(print)

On construction the client connects, reads the lircd version and the
remotes with their keys. The remote catalog is fixed from then on.
'''

import logging
import types

from .commands import (ListKeysCommand, ListRemotesCommand, SendCommand,
                       StartRepeatCommand, StopRepeatCommand, VersionCommand)
from .config import ClientConfig
from .connection import LineConnection
from .dispatcher import ReplyDispatcher
from .exceptions import BootstrapError, TruncatedReplyError
from .remote import Remote

_LOG = logging.getLogger(__name__)


class LircClient(object):
    ''' A client connected to lircd.

    Parameters:
      - remote: Remote name (any case) to select, by default the one in
        config or else the first remote listed by lircd.
      - socket_path: lircd socket, overrides the config.
      - config: A ClientConfig, defaults to ClientConfig().
      - conn: An open connection to use instead of connecting, mostly for
        tests. It is closed along with the client.

    Raises LircdConnectionError if lircd cannot be reached and
    BootstrapError if the version or remotes cannot be read or the
    remote is unknown.
    '''

    def __init__(self, remote=None, socket_path=None, config=None,
                 conn=None):
        if config is None:
            config = ClientConfig()
        if socket_path is None:
            socket_path = config.socket_path
        if remote is None:
            remote = config.remote
        self._remote = None
        self._sending = None         # << (remote, key) being repeated
        if conn is None:
            conn = LineConnection(socket_path, timeout=config.timeout)
        self._conn = conn
        self._dispatcher = ReplyDispatcher(conn)
        try:
            self._version = self._query_version()
            self._remotes = self._query_remotes()
            self._remote = self._initial_remote(remote)
        except BaseException:
            self._conn.close()
            raise
        _LOG.debug('Connected to lircd %s, remote %s',
                   self._version, self._remote.name)

    def _query_version(self):
        try:
            reply = VersionCommand(self._dispatcher).run()
        except TruncatedReplyError as ex:
            raise BootstrapError('VERSION: %s' % ex) from ex
        if reply is None or not reply.success or not reply.data:
            raise BootstrapError('Cannot get lircd version')
        return reply.data[0]

    def _query_remotes(self):
        ''' Return read-only mapping of upper case name -> Remote. '''
        try:
            reply = ListRemotesCommand(self._dispatcher).run()
            if reply is None or not reply.success:
                raise BootstrapError('Cannot list remotes')
            remotes = {}
            for name in reply.data or ():
                remote = Remote(name, self._query_keys(name))
                if remote.name in remotes:
                    _LOG.warning('Ignoring remote %s, same name as %s',
                                 name, remotes[remote.name].wire_name)
                    continue
                remotes[remote.name] = remote
        except TruncatedReplyError as ex:
            raise BootstrapError('LIST: %s' % ex) from ex
        if not remotes:
            raise BootstrapError('lircd has no remotes configured')
        return types.MappingProxyType(remotes)

    def _query_keys(self, name):
        reply = ListKeysCommand(self._dispatcher, name).run()
        if reply is None or not reply.success:
            raise BootstrapError('Cannot list keys for remote %s' % name)
        keys = []
        for line in reply.data or ():
            words = line.split()
            if len(words) < 2:
                raise BootstrapError('Bad key line for %s: "%s"'
                                     % (name, line))
            keys.append(words[1])
        return keys

    def _initial_remote(self, name):
        if name is None:
            return next(iter(self._remotes.values()))
        try:
            return self._remotes[name.upper()]
        except KeyError:
            raise BootstrapError('Remote %s not supported' % name) from None

    @property
    def version(self):
        ''' lircd version string. '''
        return self._version

    @property
    def remotes(self):
        ''' Read-only mapping of upper case remote name -> Remote, in the
        order lircd listed them.
        '''
        return self._remotes

    @property
    def remote(self):
        ''' The selected Remote. '''
        return self._remote

    @property
    def sending_key(self):
        ''' Key started by send_key_start() and not yet stopped, or None. '''
        return self._sending[1] if self._sending else None

    @property
    def closed(self):
        return self._conn.closed

    def set_remote(self, name):
        ''' Select remote by name (any case), False if unknown. '''
        if self.closed or not isinstance(name, str):
            return False
        remote = self._remotes.get(name.upper())
        if remote is None:
            _LOG.warning('Unknown remote: %s', name)
            return False
        self._remote = remote
        return True

    def _wire_key(self, key):
        ''' Return lircd's spelling of key in the selected remote or None. '''
        if self.closed or not isinstance(key, str):
            return None
        if not self._remote.supports_key(key):
            _LOG.warning('Remote %s has no key %s', self._remote.name, key)
            return None
        return self._remote.wire_key(key)

    def send_key(self, key, count=0):
        ''' Send key once, repeated count times if count > 0. '''
        wire_key = self._wire_key(key)
        if wire_key is None:
            return False
        return SendCommand(self._dispatcher, self._remote.wire_name,
                           wire_key, count).execute()

    def send_key_start(self, key):
        ''' Start sending key repeatedly until send_key_stop(). '''
        if self._sending:
            _LOG.warning('Already sending %s', self._sending[1].upper())
            return False
        wire_key = self._wire_key(key)
        if wire_key is None:
            return False
        cmd = StartRepeatCommand(self._dispatcher, self._remote.wire_name,
                                 wire_key)
        if not cmd.execute():
            return False
        self._sending = (self._remote, wire_key)
        return True

    def send_key_stop(self):
        ''' Stop the key started by send_key_start(). '''
        if self.closed or not self._sending:
            return False
        remote, key = self._sending
        if not StopRepeatCommand(self._dispatcher, remote.wire_name,
                                 key).execute():
            return False
        self._sending = None
        return True

    def next_event(self):
        ''' Return next Reply or KeyEvent, None at end of stream. '''
        if self.closed:
            return None
        return self._dispatcher.next_event()

    def wait_for_key(self, on_key, on_reply=None):
        ''' Deliver at most one key event, see ReplyDispatcher.wait_for_key.
        '''
        if self.closed:
            return False
        return self._dispatcher.wait_for_key(on_key, on_reply)

    def close(self):
        ''' Close the connection to lircd. '''
        self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, traceback):
        self.close()


# vim: set expandtab ts=4 sw=4:
