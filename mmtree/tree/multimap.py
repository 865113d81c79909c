from . import bstree
from .. import log
from .cursor import ConstCursor, Cursor

class MultiMapTree(bstree.BSTree):
    """An unbalanced binary search tree mapping keys to values.

    Any number of entries may share a key. An entry whose key equals that of
    a node on the insertion path goes into that node's left subtree.
    Removing a node with two children moves its in-order successor's key up,
    and an equal key may remain in the right subtree below it. The ordering
    guarantee is therefore left keys <= node key <= right keys; the in-order
    sequence is always sorted, so entries sharing a key form a single run.

    Keys must be totally ordered. Values need only be ordered if min() or
    max() is used. The tree is not safe for concurrent use.
    """

    def __init__(self, iterable=None, checked=False,
                 node_type=bstree.BSTreeNode):
        super(MultiMapTree, self).__init__(node_type)
        self.checked = checked
        self.generation = 0
        self._size = 0
        if iterable is not None:
            for k, v in iterable:
                self.insert(k, v)

    def _mutated(self):
        self.generation += 1

    def _cursor(self, node):
        return Cursor(self, node)

    def _const_cursor(self, node):
        return ConstCursor(self, node)

    def begin(self):
        return self._cursor(self.minimum())

    def end(self):
        return self._cursor(None)

    def cbegin(self):
        return self._const_cursor(self.minimum())

    def cend(self):
        return self._const_cursor(None)

    def size(self):
        """Returns the number of entries stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def insert(self, k, v):
        """Inserts an entry with key k and value v. Entries with an equal key
        are kept, never replaced.

        Returns a cursor at the new entry.
        Time complexity: O(h)"""
        y = self.nil
        x = self.root
        while x is not self.nil:
            y = x
            if x.key >= k:
                x = x.left
            else:
                x = x.right

        new = self.node_type(k=k, v=v, nil=self.nil, parent=y)
        if y is self.nil:
            self.root = new
        elif y.key >= k:
            y.left = new
        else:
            y.right = new
        self._size += 1
        self._mutated()
        return self._cursor(new)

    def find(self, k):
        """Returns a cursor at the first entry with key k met on the search
        path from the root, or end() if there is none.

        This is not necessarily the first entry with key k in sorted order;
        use equal_range() for that.
        Time complexity: O(h)"""
        return self._cursor(self.find_node(k))

    def cfind(self, k):
        return self._const_cursor(self.find_node(k))

    def _equal_range_nodes(self, k):
        x = self.find_node(k)
        if x is None:
            return None, None
        first = x
        y = self.predecessor(first)
        while y is not None and y.key == k:
            first = y
            y = self.predecessor(y)
        last = self.successor(x)
        while last is not None and last.key == k:
            last = self.successor(last)
        return first, last

    def equal_range(self, k):
        """Returns the half-open cursor range [first, last) holding every
        entry with key k. Both are end() if k is absent.

        Time complexity: O(h + m), m being the number of matching entries"""
        first, last = self._equal_range_nodes(k)
        return self._cursor(first), self._cursor(last)

    def cequal_range(self, k):
        first, last = self._equal_range_nodes(k)
        return self._const_cursor(first), self._const_cursor(last)

    def _extremum(self, k, better):
        first, last = self._equal_range_nodes(k)
        best = first
        x = first
        while x is not last:
            if better(x.value, best.value):
                best = x
            x = self.successor(x)
        return self._const_cursor(best)

    def min(self, k):
        """Returns a const cursor at the entry with the smallest value among
        the entries with key k, or cend() if k is absent. Ties go to the
        entry that comes first in sorted order."""
        return self._extremum(k, lambda a, b: a < b)

    def max(self, k):
        """Returns a const cursor at the entry with the largest value among
        the entries with key k, or cend() if k is absent. Ties go to the
        entry that comes first in sorted order."""
        return self._extremum(k, lambda a, b: a > b)

    def _unlink(self, node):
        node.parent = None
        node.left = None
        node.right = None

    def _delete(self, node):
        """Removes node from the tree.

        When node has two children, the key and value of its in-order
        successor move into node and the successor is removed instead.
        Time complexity: O(h)"""
        if node.left is self.nil:
            log.debug3("removing node with key ", repr(node.key),
                       " (at most one child)")
            self._transplant(node, node.right)
        elif node.right is self.nil:
            log.debug3("removing node with key ", repr(node.key),
                       " (left child only)")
            self._transplant(node, node.left)
        else:
            y = self.minimum(node.right)
            log.debug3("removing node with key ", repr(node.key),
                       " (two children, successor ", repr(y.key), ")")
            node.key = y.key
            node.value = y.value
            self._transplant(y, y.right)
            node = y
        self._unlink(node)
        self._size -= 1
        self._mutated()

    def erase(self, k):
        """Removes every entry with key k.

        Returns the number of removed entries; erasing an absent key is a
        no-op returning 0.
        Time complexity: O(m * h), m being the number of matching entries"""
        n = 0
        x = self.find_node(k)
        while x is not None:
            self._delete(x)
            n += 1
            x = self.find_node(k)
        if n > 0:
            log.debug2("erased ", n, " entries with key ", repr(k))
        return n

    def clear(self):
        """Removes all entries.

        Nodes are unlinked in post-order so no parent references survive.
        Time complexity: O(n)"""
        n = self._size
        for x in self._postorder(self.root):
            self._unlink(x)
        self.root = self.nil
        self._size = 0
        self._mutated()
        log.debug2("cleared tree of ", n, " entries")

    def _clone_from(self, other):
        """Rebuilds this (empty) tree as a structural copy of other."""
        if other.root is other.nil:
            return
        self.root = self.node_type(k=other.root.key, v=other.root.value,
                                   nil=self.nil)
        stack = [(other.root, self.root)]
        while stack:
            src, dst = stack.pop()
            if src.left is not other.nil:
                dst.left = self.node_type(k=src.left.key, v=src.left.value,
                                          nil=self.nil, parent=dst)
                stack.append((src.left, dst.left))
            if src.right is not other.nil:
                dst.right = self.node_type(k=src.right.key, v=src.right.value,
                                           nil=self.nil, parent=dst)
                stack.append((src.right, dst.right))
        self._size = other._size
        self._mutated()

    def copy(self):
        """Returns an independent tree holding the same entries in the same
        layout. Keys and values themselves are shared, not copied.

        Time complexity: O(n)"""
        other = self.__class__(checked=self.checked, node_type=self.node_type)
        other._clone_from(self)
        return other

    __copy__ = copy

    def take(self, other):
        """Discards the entries of this tree and takes over those of other,
        leaving other empty but usable.

        Returns self.
        Time complexity: O(n) for the discarded entries, O(1) for the rest"""
        if other is self:
            return self
        self.clear()
        self.root, other.root = other.root, self.root
        self.nil, other.nil = other.nil, self.nil
        self.node_type, other.node_type = other.node_type, self.node_type
        self._size, other._size = other._size, 0
        self._mutated()
        other._mutated()
        log.debug1("moved ", self._size, " entries between trees")
        return self

    def move(self):
        """Returns a new tree owning the entries of this one, which is left
        empty but usable."""
        other = self.__class__(checked=self.checked, node_type=self.node_type)
        return other.take(self)

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __contains__(self, k):
        return self.contains(k)

    def items(self):
        """Yields (key, value) pairs in ascending key order."""
        x = self.minimum()
        while x is not None:
            yield x.item()
            x = self.successor(x)

    def keys(self):
        for k, _ in self.items():
            yield k

    def values(self):
        for _, v in self.items():
            yield v

    def __iter__(self):
        return self.items()

    def __reversed__(self):
        x = self.maximum()
        while x is not None:
            yield x.item()
            x = self.predecessor(x)

    def __repr__(self):
        return "{0}([{1}])".format(self.__class__.__name__,
                ", ".join("({0!r}, {1!r})".format(k, v) for k, v in self))
