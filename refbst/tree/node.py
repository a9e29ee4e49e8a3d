import weakref


class _NullRef(object):
    """An observational link that never resolves to a node."""

    def __call__(self):
        return None

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NULL_REF'

NULL_REF = _NullRef()


def make_ref(node):
    """Returns an observational (weak) link to node.

    node:    a TreeNode, or None for the empty link

    """
    if node is None:
        return NULL_REF
    return weakref.ref(node)

def upgrade(ref):
    """Resolves an observational link.

    Returns the node if it is still alive, None otherwise. The returned
    node is an owning handle for as long as the caller keeps it.
    """
    if ref is None:
        return None
    return ref()

def count_nodes(node):
    """Counts the nodes of the subtree rooted at node.

    Time complexity: O(n)"""
    n = 0
    stack = [node] if node is not None else []
    while stack:
        x = stack.pop()
        n += 1
        if x.left is not None:
            stack.append(x.left)
        if x.right is not None:
            stack.append(x.right)
    return n


class TreeNode(object):
    """A binary search tree node owning its two children.

    A node has no link to its parent. The left and right attributes are
    owning links; a node stays alive as long as one of them (or some
    other handle) refers to it.
    """

    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None

    @classmethod
    def with_children(cls, value, left_ref=NULL_REF, right_ref=NULL_REF):
        """Creates a node and attaches the targets of left_ref and right_ref.

        A link whose target is gone leaves its slot empty.
        """
        node = cls(value)
        node.left = upgrade(left_ref)
        node.right = upgrade(right_ref)
        return node

    def set_left_child(self, new_left_ref):
        """Replaces the left child and returns the previous one.

        The detached subtree is reclaimed once the caller drops the
        returned handle.
        """
        old = self.left
        self.left = upgrade(new_left_ref)
        return old

    def set_right_child(self, new_right_ref):
        """Replaces the right child and returns the previous one."""
        old = self.right
        self.right = upgrade(new_right_ref)
        return old

    def ref(self):
        return weakref.ref(self)

    def is_leaf(self):
        return self.left is None and self.right is None

    def child_count(self):
        return (self.left is not None) + (self.right is not None)

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        def _val(x):
            return repr(x.value) if x is not None else 'None'
        return '{0}({1!r}, left={2}, right={3})'.format(
                type(self).__name__, self.value,
                _val(self.left), _val(self.right))
