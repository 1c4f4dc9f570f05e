# Singly linked list that tracks head, tail and size, supporting
# insertion and removal at either end or at an arbitrary index.

import logging
import operator

from forwardlist.errors import IndexOutOfRange
from forwardlist.errors import InvalidArgument
from forwardlist.node import Node

log = logging.getLogger(__name__)


class LinkedList:
    '''Ordered, mutable sequence of values kept in forward-linked nodes.

    head, tail and size are read-only. Links between nodes are only ever
    rewritten by the methods of this class, so the chain from head always
    reaches tail in exactly size steps.
    '''

    def __init__(self, values=None):
        self._head = None
        self._tail = None
        self._size = 0

        if values is not None:
            for value in values:
                self.append(value)

    @property
    def head(self):
        return self._head

    @property
    def tail(self):
        return self._tail

    @property
    def size(self):
        return self._size

    def __len__(self):
        return self._size

    def __iter__(self):
        for node in self.nodes():
            yield node.value

    def __contains__(self, value):
        return self.contains(value)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return 'List(head={}, tail={}, size={})'.format(
            hex(id(self._head)) if self._head else None,
            hex(id(self._tail)) if self._tail else None,
            self._size)

    #------------------------------------------------------------
    # Link primitives, size is left to the caller
    # -----------------------------------------------------------

    def _validate_node(self, node):
        if not isinstance(node, Node):
            raise InvalidArgument(node)

    def _set_head_node(self, node):
        self._validate_node(node)

        if self._head is None:
            self._head = node
            self._tail = node
            node._next = None
        else:
            # a pre-linked chain keeps its own link
            if node._next is None:
                node._next = self._head
            self._head = node

    def _set_tail_node(self, node):
        if self._head is None or self._tail is None:
            return

        self._validate_node(node)

        self._tail._next = node
        self._tail = node
        node._next = None

    #------------------------------------------------------------
    # Traversal
    # -----------------------------------------------------------

    def nodes(self):
        '''Yield each node from head to tail.

        Every call starts a fresh walk from the current head.
        '''
        node = self._head
        while node is not None:
            yield node
            node = node._next

    def traverse(self, callback=None, file=None):
        '''Call callback(node) on each node from head to tail.

        Traversal stops as soon as the callback returns True, in which case
        True is returned. Otherwise returns False once the chain is exhausted.
        Without a callback each value is printed to file (stdout by default).
        '''
        if self._size == 0:
            return False

        if callback is None:
            def callback(node):
                print(node.value, file=file)

        for node in self.nodes():
            if callback(node) is True:
                return True
        return False

    #------------------------------------------------------------
    # Insertion
    # -----------------------------------------------------------

    def append(self, value):
        node = Node(value)

        if self._head is None:
            self._set_head_node(node)
        else:
            self._set_tail_node(node)

        self._size += 1
        return node

    def prepend(self, value):
        node = Node(value)
        self._set_head_node(node)
        self._size += 1
        return node

    def insert_at(self, value, index):
        '''Insert value so that it ends up at position index.

        Accepts any index in [0, size]; index == size appends.
        Raises IndexOutOfRange otherwise, without touching the list,
        and TypeError when index is not an integer.
        '''
        index = operator.index(index)

        if index < 0 or index > self._size:
            log.debug('insert_at rejected index %s for size %s',
                      index, self._size)
            raise IndexOutOfRange(index, self._size)

        node = Node(value)

        if index == 0:
            self._set_head_node(node)
        elif index == self._size:
            self._set_tail_node(node)
        else:
            prev = self.at(index - 1)
            assert prev is not None
            node._next = prev._next
            prev._next = node

        self._size += 1
        return node

    #------------------------------------------------------------
    # Removal
    # -----------------------------------------------------------

    def pop(self):
        '''Remove the last node and return its value, None if empty.'''
        if self._size == 0:
            return None

        node = self._tail

        if self._head is self._tail:
            self._head = None
            self._tail = None
        else:
            for prev in self.nodes():
                if prev._next is self._tail:
                    break
            prev._next = None
            self._tail = prev

        self._size -= 1
        return node.value

    def remove_at(self, index):
        '''Remove the node at index and return its value.

        A negative index is ignored and returns None. An index at or past
        the end raises IndexOutOfRange and leaves the list as it was.
        On a single-node list any valid index removes that node.
        '''
        index = operator.index(index)

        if index < 0:
            log.debug('remove_at ignoring negative index %s', index)
            return None

        if index >= self._size:
            log.debug('remove_at rejected index %s for size %s',
                      index, self._size)
            raise IndexOutOfRange(index, self._size)

        if self._size == 1:
            return self.pop()

        if index == 0:
            node = self._head
            self._head = node._next
            node._next = None
            self._size -= 1

            if self._size == 1:
                self._head._next = None
            return node.value

        prev = self.at(index - 1)
        assert prev is not None
        node = prev._next

        if node is self._tail:
            prev._next = None
            self._tail = prev
        else:
            prev._next = node._next

        node._next = None
        self._size -= 1
        return node.value

    #------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------

    def contains(self, value):
        return any(node.value == value for node in self.nodes())

    def find(self, value):
        '''Index of the first node equal to value, or None.'''
        for index, node in enumerate(self.nodes()):
            if node.value == value:
                return index
        return None

    def at(self, index):
        '''Node at the 0-based index, or None when out of range.'''
        if index < 0 or index >= self._size:
            return None

        for current, node in enumerate(self.nodes()):
            if current == index:
                return node
        return None

    def to_string(self):
        return ' => '.join('( {} )'.format(node.value) for node in self.nodes())
