# Errors raised by list operations.

class InvalidArgument(TypeError):
    '''An operation that needs a Node was handed something else.'''

    def __init__(self, value):
        super().__init__(
            'Invalid node type: {!r}, must be an instance of Node'.format(value))
        self.value = value


class IndexOutOfRange(IndexError):
    '''Index outside the range an operation accepts. The list is unchanged.'''

    def __init__(self, index, size):
        super().__init__(
            'Index out of bounds: {} (size={})'.format(index, size))
        self.index = index
        self.size = size
