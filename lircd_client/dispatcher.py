''' Reading replies and key events from the shared lircd stream.

lircd writes command replies framed by BEGIN/END and unframed key event
lines to the same socket, in any order. Replies may also show up unasked,
e.g. the SIGHUP reply sent after lircd reloads its configuration, so a
reply has to be matched against the command which was sent.
'''

import logging

from .exceptions import BadPacketException, TruncatedReplyError
from .parser import ReplyParser
from .reply import KeyEvent, Reply

_LOG = logging.getLogger(__name__)


class ReplyDispatcher(object):
    ''' Sort the lines from a connection into replies and key events.

    The connection is anything with readline() returning a line or None
    at end of stream, and send(text) for commands. Not thread safe: only
    one round-trip may be in flight.
    '''

    def __init__(self, conn):
        self._conn = conn

    def _parse_reply(self):
        ''' Parse a reply after BEGIN, return None if it was discarded.

        Raises TruncatedReplyError if the stream ends inside the reply.
        '''
        parser = ReplyParser()
        while not parser.is_completed():
            line = self._conn.readline()
            if line is None:
                raise TruncatedReplyError('Stream ended inside a reply')
            try:
                parser.feed(line)
            except BadPacketException as ex:
                _LOG.warning('Discarding bad reply: %s', ex)
                if line.strip() != 'BEGIN' and not self._skip_reply():
                    return None
                parser = ReplyParser()
        return parser.result

    def _skip_reply(self):
        ''' Discard the rest of a bad reply up to END.

        Returns True if a BEGIN came first, False after END.
        '''
        while True:
            line = self._conn.readline()
            if line is None:
                raise TruncatedReplyError('Stream ended inside a reply')
            line = line.strip()
            if line == 'END':
                return False
            if line == 'BEGIN':
                return True

    def wait_for_reply(self):
        ''' Skip lines until BEGIN, return next Reply or None at end. '''
        while True:
            line = self._conn.readline()
            if line is None:
                return None
            if line.strip() != 'BEGIN':
                continue
            reply = self._parse_reply()
            if reply is not None:
                return reply

    def wait_for_command_reply(self, command):
        ''' Return the Reply to command, None if the stream ends first. '''
        while True:
            reply = self.wait_for_reply()
            if reply is None or reply.command == command:
                return reply
            _LOG.info('Discarding reply to "%s" while waiting for "%s"',
                      reply.command, command)

    def get_command_status(self, command):
        ''' Return True if the reply to command reports SUCCESS. '''
        try:
            reply = self.wait_for_command_reply(command)
        except TruncatedReplyError as ex:
            _LOG.warning('No reply to "%s": %s', command, ex)
            return False
        if reply is None:
            _LOG.warning('Stream ended waiting for reply to "%s"', command)
            return False
        return reply.success

    def send_command(self, command):
        ''' Send command, return True if its reply reports SUCCESS. '''
        self._conn.send(command)
        return self.get_command_status(command)

    def query(self, command):
        ''' Send command, return its Reply or None if the stream ended. '''
        self._conn.send(command)
        return self.wait_for_command_reply(command)

    def next_event(self):
        ''' Return next Reply or KeyEvent, None at end of stream. '''
        while True:
            line = self._conn.readline()
            if line is None:
                return None
            if line.strip() == 'BEGIN':
                reply = self._parse_reply()
                if reply is not None:
                    return reply
                continue
            if not line.strip():
                continue
            try:
                return KeyEvent.parse(line)
            except BadPacketException as ex:
                _LOG.warning('Ignoring bad event line: %s', ex)

    def events(self):
        ''' Generate Reply and KeyEvent items until end of stream. '''
        event = self.next_event()
        while event is not None:
            yield event
            event = self.next_event()

    def wait_for_key(self, on_key, on_reply=None):
        ''' Deliver at most one key event to on_key(event).

        Replies read before the key event are passed to on_reply(reply)
        if given. Returns False if a callback returns a false value, on a
        truncated reply or at end of stream, else the key was delivered
        and True is returned.
        '''
        try:
            for event in self.events():
                if isinstance(event, Reply):
                    if on_reply is not None and not on_reply(event):
                        return False
                    continue
                return bool(on_key(event))
        except TruncatedReplyError as ex:
            _LOG.warning('Waiting for key: %s', ex)
        return False


# vim: set expandtab ts=4 sw=4:
