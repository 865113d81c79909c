
class MMTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class CursorError(MMTreeError):
    pass

class EndCursorError(CursorError):
    def __str__(self):
        return "end cursor dereferenced"

class StaleCursorError(CursorError):
    def __init__(self, captured, current):
        super(StaleCursorError, self).__init__(captured, current)
        self.captured = captured
        self.current = current

    def __str__(self):
        return ("cursor used after the tree was modified (generation " +
                str(self.captured) + ", tree is at " + str(self.current) + ")")

class ReadOnlyCursorError(CursorError):
    def __str__(self):
        return "cannot assign through a const cursor"
