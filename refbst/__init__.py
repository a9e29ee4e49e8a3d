from .exception import (
        RefBSTError,
        LastElementError,
        OrderError,
        DetachedNodeError
    )
from .tree.node import TreeNode, NULL_REF, make_ref, upgrade
from .tree.bstree import Tree, SUCCESSOR, PREDECESSOR

__version__ = "0.1.0"
