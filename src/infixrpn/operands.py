from collections.abc import Mapping
from types import MappingProxyType
import logging
import math

import regex


logger = logging.getLogger(__name__)


class OperandRegistry(Mapping):
    '''
    Named operands (variables) resolved at evaluation time.

    Read-only as a mapping; mutate through add, remove and clear. Last write
    wins.
    '''
    NAME = r'[a-z]+'

    def __init__(self):
        self._values = dict()

    def __getitem__(self, name):
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._values)

    def isname(self, name):
        '''
        Return True if name is usable for an operand: lowercase letters only.
        '''
        return regex.fullmatch(type(self).NAME, name) is not None

    def add(self, name, value):
        '''
        Add or update operand.

        :returns: False, leaving the registry untouched, on a bad name or a
                  non-numeric or non-finite value.
        '''
        try:
            value = float(value)
        except (TypeError, ValueError):
            value = math.nan
        if not self.isname(name) or not math.isfinite(value):
            logger.debug('Rejected operand %r = %r', name, value)
            return False
        self._values[name] = value
        return True

    def remove(self, name):
        '''
        Remove operand. Return False if there was no such operand.
        '''
        if name not in self._values:
            return False
        del self._values[name]
        return True

    def get(self, name, default=0.0):
        '''
        Value of operand, or default (0.0) if there is no such operand.
        '''
        return self._values.get(name, default)

    def all(self):
        '''
        Read-only live view of all operands.
        '''
        return MappingProxyType(self._values)

    def clear(self):
        self._values.clear()


# Process-wide registry
OPERANDS = OperandRegistry()
