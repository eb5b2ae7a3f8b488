''' Line oriented connection to the lircd socket. '''

import logging
import socket
from contextlib import suppress

from .exceptions import LircdConnectionError, TimeoutException

_LOG = logging.getLogger(__name__)


class LineConnection(object):
    ''' A unix stream socket connection to lircd, read line by line.

    Parameters:
      - socket_path: Path to the lircd socket.
      - timeout: Default readline() timeout in seconds, None blocks forever.
      - sock: An already connected socket, used instead of socket_path.

    Raises LircdConnectionError if the socket cannot be opened.
    '''

    _RECV_SIZE = 4096

    def __init__(self, socket_path=None, timeout=None, sock=None):
        self.timeout = timeout
        self._buffer = bytearray()
        self._eof = False
        if sock is None:
            if not socket_path:
                raise LircdConnectionError('No socket path')
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                sock.connect(socket_path)
            except OSError as ex:
                sock.close()
                raise LircdConnectionError(
                    'Cannot connect to %s: %s' % (socket_path, ex)) from ex
            _LOG.debug('Connected to %s', socket_path)
        self._sock = sock

    @property
    def closed(self):
        ''' True after close(). '''
        return self._sock is None

    def readline(self, timeout=-1):
        ''' Return next line without terminator, None at end of stream.

        Timeout is in seconds, None blocks forever and -1 uses the default
        timeout given to the constructor. Raises TimeoutException if no
        complete line arrives in time.
        '''
        if timeout == -1:
            timeout = self.timeout
        while True:
            pos = self._buffer.find(b'\n')
            if pos >= 0:
                line = bytes(self._buffer[:pos])
                del self._buffer[:pos + 1]
                return self._decode(line)
            sock = self._sock
            if self._eof or sock is None:
                return self._flush()
            try:
                sock.settimeout(timeout)
                data = sock.recv(self._RECV_SIZE)
            except socket.timeout:
                raise TimeoutException(
                    'No data within %s seconds' % timeout) from None
            except (ConnectionResetError, BrokenPipeError):
                data = b''
            except OSError as ex:
                if self._sock is not None:
                    raise LircdConnectionError(
                        'Cannot read from lircd: %s' % ex) from ex
                data = b''
            if not data:
                _LOG.debug('End of stream')
                self._eof = True
            self._buffer.extend(data)

    def _flush(self):
        ''' Return a final unterminated line if any, else None. '''
        if not self._buffer:
            return None
        line = bytes(self._buffer)
        self._buffer.clear()
        return self._decode(line)

    @staticmethod
    def _decode(line):
        line = line.decode('utf-8', errors='replace').rstrip('\r')
        _LOG.debug('<< %s', line)
        return line

    def send(self, text):
        ''' Write text plus a line terminator. '''
        if self._sock is None:
            raise LircdConnectionError('Connection is closed')
        _LOG.debug('>> %s', text)
        try:
            self._sock.sendall((text + '\n').encode('utf-8'))
        except OSError as ex:
            raise LircdConnectionError('Cannot send "%s": %s' % (text, ex)) \
                from ex

    def close(self):
        ''' Release the socket, a pending readline() sees end of stream. '''
        sock, self._sock = self._sock, None
        if sock is None:
            return
        with suppress(OSError):
            sock.shutdown(socket.SHUT_RDWR)
        sock.close()
        _LOG.debug('Connection closed')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, traceback):
        self.close()


# vim: set expandtab ts=4 sw=4:
