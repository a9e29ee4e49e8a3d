import copy

from .node import TreeNode, NULL_REF, make_ref, upgrade, count_nodes
from .. import log
from ..exception import LastElementError, OrderError, DetachedNodeError

# which node takes the place of a removed node with two children
SUCCESSOR = 0
PREDECESSOR = 1

class Tree(object):
    """An unbalanced binary search tree holding unique values.

    The tree is never empty: it is created from an initial value and
    refuses to remove its last element. Child links are owning
    references, every walk goes through weak links which are upgraded
    right before a node is read or mutated.
    """

    def __init__(self, root_value, node_type=TreeNode, replacement=SUCCESSOR):
        if replacement not in (SUCCESSOR, PREDECESSOR):
            raise ValueError("invalid replacement policy: " + str(replacement))
        self.node_type = node_type
        self.replacement = replacement
        self._root = self.node_type(root_value)
        self._size = 1

    @property
    def root(self):
        return self._root

    def size(self):
        """Returns the number of values stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def __len__(self):
        return self._size

    def contains(self, value):
        return upgrade(self.find_value(value)) is not None

    def __contains__(self, value):
        return self.contains(value)

    def _upgrade(self, ref, *what):
        x = upgrade(ref)
        if x is None:
            raise DetachedNodeError(*what)
        return x

    def _descend(self, value):
        """Walks down from the root looking for value.

        Returns a pair of weak links (parent, node). If value is not in
        the tree node is NULL_REF and parent leads to the wedge point.
        Time complexity: O(depth)"""
        parent_ref = NULL_REF
        ref = make_ref(self._root)
        while ref is not NULL_REF:
            x = self._upgrade(ref, "lost track of node while looking for ",
                              value)
            if value == x.value:
                return parent_ref, ref
            parent_ref = ref
            if value < x.value:
                ref = make_ref(x.left)
            else:
                ref = make_ref(x.right)
        return parent_ref, NULL_REF

    def _attach(self, parent_ref, new):
        parent = self._upgrade(parent_ref, "wedge point vanished: ", new)
        if new.value < parent.value:
            parent.set_left_child(make_ref(new))
        else:
            parent.set_right_child(make_ref(new))

    def insert_value(self, value):
        """Inserts value as a new leaf.

        Returns False if value is already present, True otherwise.
        Time complexity: O(depth)"""
        parent_ref, ref = self._descend(value)
        if ref is not NULL_REF:
            log.debug2("not inserted, already present: ", value)
            return False
        self._attach(parent_ref, self.node_type(value))
        self._size += 1
        log.debug2("inserted ", value)
        return True

    def insert_node(self, node):
        """Attaches node, together with its subtrees, at its wedge point.

        Returns False if node's value is already present. Raises
        OrderError if the subtree below node is unordered or does not fit
        into the free slot it is attached to.
        Time complexity: O(k * depth) for a subtree of k nodes"""
        parent_ref, ref = self._descend(node.value)
        if ref is not NULL_REF:
            log.debug2("node not inserted, already present: ", node.value)
            return False
        self._check_subtree(node, parent_ref)
        self._attach(parent_ref, node)
        n = count_nodes(node)
        self._size += n
        log.debug2("inserted node ", node.value, " (", n, " values)")
        return True

    def _check_subtree(self, node, parent_ref):
        wedge = self._upgrade(parent_ref, "wedge point vanished: ", node)
        left_side = node.value < wedge.value
        seen = set()
        stack = [(node, None, None)]
        while stack:
            x, low, high = stack.pop()
            if id(x) in seen:
                raise OrderError("node ", x, " linked twice")
            seen.add(id(x))
            if ((low is not None and not low < x.value) or
                    (high is not None and not x.value < high)):
                raise OrderError("subtree of ", node, " unordered at ", x)
            if x is not node:
                p_ref, ref = self._descend(x.value)
                if ref is not NULL_REF:
                    raise OrderError(x, " already present")
                if (upgrade(p_ref) is not wedge or
                        (x.value < wedge.value) != left_side):
                    raise OrderError(x, " does not fit below ", wedge)
            if x.left is not None:
                stack.append((x.left, low, x.value))
            if x.right is not None:
                stack.append((x.right, x.value, high))

    def find_value(self, value):
        """Finds the node holding value.

        Returns a weak link to the node, or NULL_REF if value is not in
        the tree.
        Time complexity: O(depth)"""
        parent_ref, ref = self._descend(value)
        return ref

    def remove_value(self, value):
        """Removes value from the tree.

        Returns the detached node, or None if value is not in the tree.
        Raises LastElementError when value is the only one left.
        Time complexity: O(depth)"""
        parent_ref, ref = self._descend(value)
        if ref is NULL_REF:
            log.debug2("not removed, not present: ", value)
            return None
        x = self._upgrade(ref, "lost track of node ", value)
        if parent_ref is NULL_REF and x.is_leaf():
            raise LastElementError(value)
        self._splice_out(parent_ref, x)
        self._size -= 1
        if log.logger.enabled_for(log.LOG_DEBUG3):
            log.debug3("detached node ", repr(x))
        log.debug2("removed ", value)
        return x

    def _replace_child(self, parent_ref, old, new):
        """Puts new (possibly None) into the slot of parent holding old."""
        if parent_ref is NULL_REF:
            self._root = new
            return
        parent = self._upgrade(parent_ref, "parent of ", old, " vanished")
        if old.value < parent.value:
            parent.set_left_child(make_ref(new))
        else:
            parent.set_right_child(make_ref(new))

    def _replacement(self, x):
        """Finds the node that takes the place of x, which has two children.

        Returns a pair (weak link to its parent, node)."""
        parent_ref = make_ref(x)
        if self.replacement == SUCCESSOR:
            y = x.right
            while y.left is not None:
                parent_ref = make_ref(y)
                y = y.left
        else:
            y = x.left
            while y.right is not None:
                parent_ref = make_ref(y)
                y = y.right
        return parent_ref, y

    def _splice_out(self, parent_ref, x):
        """Unlinks x from the tree, keeping all other nodes in order.

        On return x has no children and nothing in the tree refers to it.
        """
        if x.left is None or x.right is None:
            child = x.left if x.left is not None else x.right
            x.set_left_child(NULL_REF)
            x.set_right_child(NULL_REF)
            self._replace_child(parent_ref, x, child)
        else:
            repl_parent_ref, repl = self._replacement(x)
            # repl has at most one child
            self._splice_out(repl_parent_ref, repl)
            left = x.set_left_child(NULL_REF)
            right = x.set_right_child(NULL_REF)
            repl.set_left_child(make_ref(left))
            repl.set_right_child(make_ref(right))
            self._replace_child(parent_ref, x, repl)

    def minimum(self):
        """Returns a copy of the smallest value.

        Time complexity: O(depth)"""
        x = self._root
        while x.left is not None:
            x = x.left
        return copy.copy(x.value)

    def maximum(self):
        """Returns a copy of the largest value.

        Time complexity: O(depth)"""
        x = self._root
        while x.right is not None:
            x = x.right
        return copy.copy(x.value)

    def __str__(self):
        return '{0}(root={1}, size={2})'.format(
                type(self).__name__, self._root, self._size)

    __repr__ = __str__
