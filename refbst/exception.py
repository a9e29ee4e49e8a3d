class RefBSTError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class LastElementError(RefBSTError):
    def __init__(self, value=None):
        super(LastElementError, self).__init__(value)
        self.value = value

    def __str__(self):
        return ("cannot remove sole remaining element: " +
                str(self.value))

class OrderError(RefBSTError):
    def __str__(self):
        return 'ordering violated: ' + ''.join(map(str, self.args))

class DetachedNodeError(RefBSTError):
    """A weak link the tree followed itself died mid-operation.

    Internal consistency guard; links handed to callers resolve to None
    instead of raising this.
    """

    def __str__(self):
        return ('node detached during operation: ' +
                ''.join(map(str, self.args)))
