''' A remote and its keys as reported by lircd's LIST command. '''

import types


class Remote(object):
    ''' A remote and the keys it supports.

    Lookups are case insensitive: name and keys are kept in upper case,
    while the spelling lircd reported is used when talking to lircd.
    '''

    def __init__(self, name, keys):
        self._wire_name = name
        self._name = name.upper()
        self._keys = types.MappingProxyType(
            {key.upper(): key for key in keys})

    @property
    def name(self):
        ''' Remote name, upper case. '''
        return self._name

    @property
    def wire_name(self):
        ''' Remote name as reported by lircd. '''
        return self._wire_name

    @property
    def keys(self):
        ''' Frozenset of supported key names, upper case. '''
        return frozenset(self._keys)

    def supports_key(self, key):
        ''' Return True if key (any case) belongs to this remote. '''
        return key.upper() in self._keys

    def wire_key(self, key):
        ''' Return lircd's spelling of key, raise KeyError if unsupported. '''
        return self._keys[key.upper()]

    def __repr__(self):
        return 'Remote(%r, %d keys)' % (self._name, len(self._keys))


# vim: set expandtab ts=4 sw=4:
