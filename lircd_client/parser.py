''' The reply parser state machine.

A lircd reply looks like:

    BEGIN
    <command>
    [SUCCESS|ERROR]
    [DATA
    n
    n lines of data]
    END

The parser is fed the lines following BEGIN, one at a time, until
is_completed() returns True. It never asks for a line after END.
'''

import enum

from .exceptions import BadPacketException
from .reply import Reply, Status


class _State(enum.Enum):
    ''' Parser states, see the module docstring. '''
    POST_BEGIN = 1          # << Expecting the command line
    POST_COMMAND = 2        # << Expecting SUCCESS, ERROR or END
    POST_STATUS = 3         # << Expecting DATA or END
    DATA_START = 4          # << Expecting the data line count
    DATA = 5                # << Collecting data lines
    POST_DATA = 6           # << Expecting END
    END = 7


class ReplyParser(object):
    ''' Assemble a Reply from the lines of a reply following BEGIN. '''

    def __init__(self):
        self._state = _State.POST_BEGIN
        self._command = None
        self._status = Status.NONE
        self._data = None
        self._count = 0
        self._handlers = {
            _State.POST_BEGIN: self._post_begin,
            _State.POST_COMMAND: self._post_command,
            _State.POST_STATUS: self._post_status,
            _State.DATA_START: self._data_start,
            _State.POST_DATA: self._post_data,
        }

    def is_completed(self):
        ''' True when END has been seen. '''
        return self._state == _State.END

    @property
    def result(self):
        ''' The parsed Reply, available once completed. '''
        if not self.is_completed():
            raise BadPacketException('Reply is not completed')
        return Reply(self._command, self._status, self._data)

    def feed(self, line):
        ''' Consume next line, raise BadPacketException on bad input. '''
        if self.is_completed():
            raise BadPacketException('Line after END: "%s"' % line)
        if self._state == _State.DATA:
            self._collect(line)
        else:
            self._handlers[self._state](line.strip())

    def _post_begin(self, line):
        self._command = line
        self._state = _State.POST_COMMAND

    def _post_command(self, line):
        if line == 'END':
            self._state = _State.END
        elif line == 'SUCCESS':
            self._status = Status.SUCCESS
            self._state = _State.POST_STATUS
        elif line == 'ERROR':
            self._status = Status.ERROR
            self._state = _State.POST_STATUS
        else:
            raise BadPacketException(
                'Expected SUCCESS, ERROR or END, got "%s"' % line)

    def _post_status(self, line):
        if line == 'END':
            self._state = _State.END
        elif line == 'DATA':
            self._state = _State.DATA_START
        else:
            raise BadPacketException('Expected DATA or END, got "%s"' % line)

    def _data_start(self, line):
        self._data = []
        if line == 'END':
            self._state = _State.END
            return
        try:
            self._count = int(line)
        except ValueError:
            raise BadPacketException('Bad data count: "%s"' % line) from None
        if self._count < 0:
            raise BadPacketException('Negative data count: %d' % self._count)
        self._state = _State.DATA if self._count else _State.POST_DATA

    def _collect(self, line):
        self._data.append(line)
        if len(self._data) == self._count:
            self._state = _State.POST_DATA

    def _post_data(self, line):
        if line != 'END':
            raise BadPacketException('Expected END, got "%s"' % line)
        self._state = _State.END


# vim: set expandtab ts=4 sw=4:
