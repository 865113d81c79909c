from .exception import (
        MMTreeError,
        CursorError,
        EndCursorError,
        StaleCursorError,
        ReadOnlyCursorError
    )
from .tree.bstree import BSTreeNode, BSTree
from .tree.cursor import ConstCursor, Cursor
from .tree.multimap import MultiMapTree

__version__ = "1.0.0"
