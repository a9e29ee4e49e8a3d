from refbst import Tree, TreeNode


def inorder(tree):
    """Values of the tree in in-order sequence, walked iteratively."""
    values = []
    stack = []
    x = tree.root
    while stack or x is not None:
        while x is not None:
            stack.append(x)
            x = x.left
        x = stack.pop()
        values.append(x.value)
        x = x.right
    return values


def check_order(tree):
    """Asserts the ordering invariant on every node, with explicit bounds."""
    stack = [(tree.root, None, None)]
    n = 0
    while stack:
        x, low, high = stack.pop()
        n += 1
        assert low is None or low < x.value, (low, x.value)
        assert high is None or x.value < high, (x.value, high)
        if x.left is not None:
            stack.append((x.left, low, x.value))
        if x.right is not None:
            stack.append((x.right, x.value, high))
    assert n == tree.size()


def build(*values, **kwargs):
    tree = Tree(values[0], **kwargs)
    for v in values[1:]:
        assert tree.insert_value(v)
    return tree


def subtree(values):
    """A detached ordered subtree of unique values, values[0] on top."""
    top = TreeNode(values[0])
    for v in values[1:]:
        x = top
        while True:
            side = "left" if v < x.value else "right"
            child = getattr(x, side)
            if child is None:
                setattr(x, side, TreeNode(v))
                break
            x = child
    return top
