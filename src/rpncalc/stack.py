from collections import deque, namedtuple

from .tokens import Kind
from .util import ErrorKind, StackError


Frame = namedtuple('Frame', 'kind value')


class Stack:
    '''
    Bounded LIFO of tagged frames.

    Used twice per expression: once by the converter for operators, brackets
    and functions, once by the machine for numbers. Instances never share
    state.
    '''

    # Frame kinds a stack can hold.
    KINDS = frozenset({Kind.NUMBER, Kind.OPERATOR, Kind.FUNCTION})

    def __init__(self, size):
        '''
        Create empty stack holding at most size frames.
        '''
        if size < 1:
            raise ValueError('Stack size must be positive, not {}'
                             .format(size))
        self.size = size
        self.frames = deque()

    def __len__(self):
        return len(self.frames)

    def __bool__(self):
        return bool(self.frames)

    def __repr__(self):
        return 'Stack({}/{}: {})'.format(len(self), self.size,
                                        list(self.frames))

    def push(self, kind, value):
        '''
        Push value as a frame of kind.
        '''
        if len(self.frames) >= self.size:
            raise StackError(ErrorKind.FULL)
        if kind not in type(self).KINDS:
            raise StackError(ErrorKind.UNKNOWN_TYPE, kind)
        self.frames.append(Frame(kind, value))

    def pop(self, expected):
        '''
        Pop and return the value on top, which must be of kind expected.

        On a kind mismatch the frame stays where it is.
        '''
        top = self.peek()
        if top.kind is not expected:
            raise StackError(ErrorKind.INVALID_TYPE,
                             '{} on top, wanted {}'.format(top.kind.name,
                                                           expected.name))
        return self.frames.pop().value

    def pop_struct(self):
        '''
        Pop and return the whole frame on top, whatever its kind.
        '''
        if not self.frames:
            raise StackError(ErrorKind.EMPTY)
        return self.frames.pop()

    def peek(self):
        '''
        Return the frame on top without popping it.
        '''
        if not self.frames:
            raise StackError(ErrorKind.EMPTY)
        return self.frames[-1]
