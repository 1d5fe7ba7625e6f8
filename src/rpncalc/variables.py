import logging

from .util import ErrorKind, NoFreeSpace, VariableNotFound


log = logging.getLogger(__name__)


class VariableStore:
    '''
    Fixed capacity mapping of variable names to values.

    Names are case sensitive. Variables are created on first assignment and
    updated in place afterwards; they are only ever dropped all together.
    '''

    CAPACITY = 100

    def __init__(self, capacity=None):
        self.capacity = type(self).CAPACITY if capacity is None else capacity
        if self.capacity < 1:
            raise ValueError('Capacity must be positive, not {}'
                             .format(self.capacity))
        # dicts keep insertion order, which is the creation order here.
        self.variables = dict()

    def get(self, name):
        '''
        Return value of variable name.
        '''
        try:
            return self.variables[name]
        except KeyError:
            raise VariableNotFound(name) from None

    def set(self, name, value):
        '''
        Assign value to variable name, creating it if there's room.
        '''
        if name not in self.variables and \
           len(self.variables) >= self.capacity:
            raise NoFreeSpace(ErrorKind.NO_FREE_SPACE,
                              'cannot create {!r}, all {} slots taken'
                              .format(name, self.capacity))
        self.variables[name] = float(value)
        log.debug('%s = %g', name, value)

    def clear(self):
        '''
        Forget every variable.
        '''
        self.variables.clear()

    def __contains__(self, name):
        return name in self.variables

    def __len__(self):
        return len(self.variables)

    def __iter__(self):
        '''
        Iterate over (name, value) pairs, oldest first.
        '''
        return iter(self.variables.items())
