import sys

# the tree only reports at debug levels; the default threshold hides them
LOG_WARN = 0
LOG_DEBUG1 = 1
LOG_DEBUG2 = 2
LOG_DEBUG3 = 3

def debug1(*msg):
    """Whole-tree transfers."""
    logger.do_log(LOG_DEBUG1, *msg)

def debug2(*msg):
    """Bulk removals: erase and clear."""
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    """Single node removals."""
    logger.do_log(LOG_DEBUG3, *msg)


class Logger(object):
    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto',
                 prefix="mmtree: "):
        self.loglevel = loglevel
        self._file = logfile
        self.prefix = prefix
        self.set_colors(colors)

    @property
    def file(self):
        # resolved lazily so a replaced sys.stderr is honoured
        return self._file if self._file is not None else sys.stderr

    def set_colors(self, preference):
        if preference == 'always':
            self.colors = Colors()
        elif preference == 'auto':
            isatty = getattr(self.file, 'isatty', None)
            if isatty is not None and isatty():
                self.colors = Colors()
            else:
                self.colors = NoColors()
        elif preference == 'never':
            self.colors = NoColors()
        else:
            raise ValueError("invalid color preference: " + str(preference))
        self._colormap = {
                LOG_DEBUG1: self.colors.CYAN,
                LOG_DEBUG2: self.colors.BLUE,
                LOG_DEBUG3: self.colors.DIM
            }

    def enabled(self, level):
        return level <= self.loglevel

    def do_log(self, level, *msg):
        if not self.enabled(level):
            return
        l = [self.prefix]
        l.extend(map(str, msg))
        color = self._colormap.get(level)
        if color is not None:
            l = self.colors.wrap_list(color, l)
        l.append("\n")
        self.file.write(''.join(l))


class NoColors(object):
    RESET = ''
    CYAN  = ''
    BLUE  = ''
    DIM   = ''

    def wrap_list(self, color, l):
        return l

class Colors(NoColors):
    RESET = '\033[0m'
    CYAN  = '\033[36m'
    BLUE  = '\033[34m'
    DIM   = '\033[2m'

    def wrap_list(self, color, l):
        l.insert(0, color)
        l.append(self.RESET)
        return l


logger = Logger()
