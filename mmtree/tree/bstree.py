class BSTreeNode(object):
    """Abstract implementation of a binary search tree node."""

    def __init__(self, k, v, nil=None, parent=None):
        self.key =  k
        self.value = v

        self.left = nil
        self.right = nil
        self.parent = parent if parent is not None else nil

    def item(self):
        return (self.key, self.value)

class BSTree(object):
    """Abstract implementation of a binary search tree.

    Absent children and the root's parent point at the tree's own nil
    sentinel. Public lookups return None instead of the sentinel."""

    def __init__(self, node_type=BSTreeNode):
        self.node_type = node_type
        self.nil = self.node_type(k=None, v=None)
        self.root = self.nil
        self.root.parent = self.nil

    def contains(self, k):
        return self.find_node(k) is not None

    def find_node(self, k):
        """Finds the first node with key k on the search path from the root.
        Returns None if k is not found.

        Time complexity: O(h)"""
        x = self.root
        while x is not self.nil:
            if x.key > k:
                x = x.left
            elif x.key < k:
                x = x.right
            else:
                break
        return x if x is not self.nil else None

    def inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        stack = []
        x = self.root
        while stack or x is not self.nil:
            if x is not self.nil:
                stack.append(x)
                x = x.left
            else:
                x = stack.pop()
                f(x)
                x = x.right

    def _postorder(self, x):
        """Returns the nodes of the subtree rooted at x in post-order.

        All links are read before the list is returned, so callers may unlink
        the nodes while walking it."""
        stack = [x] if x is not self.nil else []
        out = []
        while stack:
            x = stack.pop()
            out.append(x)
            if x.left is not self.nil:
                stack.append(x.left)
            if x.right is not self.nil:
                stack.append(x.right)
        out.reverse()
        return out

    def minimum(self, x=None):
        """Finds the node with the minimal key

        Returns None if tree is empty
        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.left is not self.nil:
            x = x.left
        return x

    def maximum(self, x=None):
        """Finds the node with the maximum key

        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.right is not self.nil:
            x = x.right
        return x

    def successor(self, x):
        """Finds the successor of node x in sorted order

        Time complexity: O(h)"""
        if x.right is not self.nil:
            return self.minimum(x.right)
        y = x.parent
        while y is not self.nil and x is y.right:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def predecessor(self, x):
        """Finds the predecessor of node x in sorted order

        Time complexity: O(h)"""
        if x.left is not self.nil:
            return self.maximum(x.left)
        y = x.parent
        while y is not self.nil and x is y.left:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def _transplant(self, old, new):
        """Replace subtree rooted at node old with the subtree rooted at node new

        Time complexity: O(1)"""
        if old.parent is self.nil:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not self.nil:
            new.parent = old.parent
