# Storage cell of a singly linked list: one value and one forward link.

class Node:
    '''Holds a value and a link to the next node in the chain.

    The link is read-only from outside; only LinkedList rewires it.
    '''
    __slots__ = ('value', '_next')

    def __init__(self, value):
        self.value = value
        self._next = None

    @property
    def next(self):
        return self._next

    def __repr__(self):
        return 'Node({!r})'.format(self.value)

    def __str__(self):
        return 'Node(addr={}, value={!r}, next={})'.format(
            hex(id(self)),
            self.value,
            hex(id(self._next)) if self._next else None)
