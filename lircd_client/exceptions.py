''' Exceptions raised by the lircd client. '''


class LircError(Exception):
    ''' Base class for all errors raised by this package. '''
    pass


class LircdConnectionError(LircError):
    ''' The lircd socket cannot be opened. '''
    pass


class BootstrapError(LircError):
    ''' The initial VERSION or LIST queries failed. '''
    pass


class BadPacketException(LircError):
    ''' A line where some specific protocol literal was required. '''
    pass


class TruncatedReplyError(BadPacketException):
    ''' The stream ended in the middle of a reply. '''
    pass


class TimeoutException(LircError):
    ''' No data arrived before the read timeout expired. '''
    pass


class ConfigError(LircError):
    ''' Bad client configuration file. '''
    pass


# vim: set expandtab ts=4 sw=4:
