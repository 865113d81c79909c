"""
Tests for the parent-linked binary search tree base class.
"""

from mmtree.tree.bstree import BSTree, BSTreeNode
from mmtree.tree.multimap import MultiMapTree


class TestBSTree:
    """Tests for BSTree navigation helpers."""

    def test_empty(self):
        """Test lookups on an empty tree return None."""
        tree = BSTree()
        assert tree.root is tree.nil
        assert tree.minimum() is None
        assert tree.maximum() is None
        assert tree.find_node(1) is None
        assert not tree.contains(1)

    def test_inorder_empty(self):
        """Test inorder on an empty tree never calls f."""
        tree = BSTree()
        seen = []
        tree.inorder(seen.append)
        assert seen == []

    def test_node_defaults(self):
        """Test a node starts with all relations pointing at nil."""
        nil = BSTreeNode(None, None)
        node = BSTreeNode(1, "a", nil=nil)
        assert node.left is nil
        assert node.right is nil
        assert node.parent is nil
        assert node.item() == (1, "a")

    def test_node_parent(self):
        """Test an explicit parent is kept."""
        nil = BSTreeNode(None, None)
        parent = BSTreeNode(2, "b", nil=nil)
        node = BSTreeNode(1, "a", nil=nil, parent=parent)
        assert node.parent is parent
        assert node.left is nil

    def test_minimum_maximum(self):
        """Test minimum and maximum of the whole tree and of a subtree."""
        tree = MultiMapTree((k, None) for k in [50, 30, 70, 20, 40, 60, 80])
        assert tree.minimum().key == 20
        assert tree.maximum().key == 80
        assert tree.minimum(tree.root.right).key == 60
        assert tree.maximum(tree.root.left).key == 40

    def test_successor_predecessor(self):
        """Test successor and predecessor walk the sorted order."""
        keys = [50, 30, 70, 20, 40, 60, 80]
        tree = MultiMapTree((k, None) for k in keys)
        x = tree.minimum()
        seen = []
        while x is not None:
            seen.append(x.key)
            x = tree.successor(x)
        assert seen == sorted(keys)

        x = tree.maximum()
        seen = []
        while x is not None:
            seen.append(x.key)
            x = tree.predecessor(x)
        assert seen == sorted(keys, reverse=True)

    def test_inorder(self):
        """Test inorder visits nodes in ascending key order."""
        keys = [7, 3, 9, 1, 5, 8, 10, 2]
        tree = MultiMapTree((k, None) for k in keys)
        seen = []
        tree.inorder(lambda x: seen.append(x.key))
        assert seen == sorted(keys)

    def test_inorder_degenerate(self):
        """Test inorder copes with a long right spine."""
        tree = MultiMapTree((k, None) for k in range(3000))
        seen = []
        tree.inorder(lambda x: seen.append(x.key))
        assert seen == list(range(3000))

    def test_postorder(self):
        """Test children are listed before their parent."""
        tree = MultiMapTree((k, None) for k in [4, 2, 6, 1, 3, 5, 7])
        order = tree._postorder(tree.root)
        assert len(order) == 7
        assert order[-1] is tree.root
        pos = {id(x): i for i, x in enumerate(order)}
        for x in order:
            for child in (x.left, x.right):
                if child is not tree.nil:
                    assert pos[id(child)] < pos[id(x)]

    def test_find_node(self):
        """Test find_node returns the first match on the search path."""
        tree = MultiMapTree([(2, "a"), (1, "x"), (2, "b")])
        x = tree.find_node(2)
        assert x is tree.root
        assert x.value == "a"
        assert tree.find_node(3) is None

    def test_transplant_root(self):
        """Test transplanting the root replaces it and clears the parent."""
        tree = MultiMapTree([(1, None), (2, None)])
        child = tree.root.right
        tree._transplant(tree.root, child)
        assert tree.root is child
        assert child.parent is tree.nil
