from ..exception import EndCursorError, ReadOnlyCursorError, StaleCursorError

class ConstCursor(object):
    """A read-only position in the in-order sequence of a tree.

    A cursor references one node of the tree it was produced by, or the end
    position (one past the maximum) when its node is None. It does not keep
    the node alive in any meaningful way: once the node is erased, or the tree
    is cleared or moved from, using the cursor is a caller error. Trees built
    with checked=True detect such use and raise StaleCursorError; unchecked
    trees do not look.
    """

    def __init__(self, tree, node):
        self._tree = tree
        self._node = node
        self._generation = tree.generation

    def _check(self):
        tree = self._tree
        if tree.checked and self._generation != tree.generation:
            raise StaleCursorError(self._generation, tree.generation)

    def _deref(self):
        if self._tree.checked:
            self._check()
            if self._node is None:
                raise EndCursorError()
        return self._node

    @property
    def key(self):
        return self._deref().key

    @property
    def value(self):
        return self._deref().value

    @value.setter
    def value(self, v):
        raise ReadOnlyCursorError()

    @property
    def item(self):
        """The (key, value) pair at this position."""
        return self._deref().item()

    def is_end(self):
        return self._node is None

    def advance(self):
        """Moves to the in-order successor and returns self.

        The end cursor stays at end.
        Time complexity: O(h)"""
        self._check()
        if self._node is not None:
            self._node = self._tree.successor(self._node)
        return self

    def retreat(self):
        """Moves to the in-order predecessor and returns self.

        The end cursor stays at end; retreating from the minimum reaches end.
        Time complexity: O(h)"""
        self._check()
        if self._node is not None:
            self._node = self._tree.predecessor(self._node)
        return self

    def post_advance(self):
        """Like advance(), but returns a copy of the previous position."""
        prev = self.copy()
        self.advance()
        return prev

    def post_retreat(self):
        """Like retreat(), but returns a copy of the previous position."""
        prev = self.copy()
        self.retreat()
        return prev

    def next(self):
        return self.copy().advance()

    def prev(self):
        return self.copy().retreat()

    def copy(self):
        c = self.__class__(self._tree, self._node)
        c._generation = self._generation
        return c

    def const(self):
        c = ConstCursor(self._tree, self._node)
        c._generation = self._generation
        return c

    def __eq__(self, other):
        if not isinstance(other, ConstCursor):
            return NotImplemented
        return self._node is other._node

    __hash__ = None

    def __repr__(self):
        if self._node is None:
            return "<{0} end>".format(self.__class__.__name__)
        return "<{0} {1!r}: {2!r}>".format(self.__class__.__name__,
                                           self._node.key, self._node.value)

class Cursor(ConstCursor):
    """A position in the in-order sequence of a tree through which the stored
    value may be replaced. Keys are never writable: changing one in place
    would break the ordering of the tree."""

    @property
    def value(self):
        return self._deref().value

    @value.setter
    def value(self, v):
        self._deref().value = v
