import sys

LOG_WARN = 0
# insert/remove outcomes
LOG_DEBUG2 = 3
# node detachment
LOG_DEBUG3 = 4

def debug2(*msg):
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    logger.do_log(LOG_DEBUG3, *msg)


class Logger(object):
    """Writes tree diagnostics above a verbosity threshold.

    Nothing is written at the default level; raise loglevel to
    LOG_DEBUG2 or LOG_DEBUG3 to trace tree operations.
    """

    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto',
                 prefix='refbst: '):
        self.loglevel = loglevel
        self.prefix = prefix
        # None means whatever sys.stderr is at write time
        self._file = logfile
        self.set_colors(colors)

    @property
    def logfile(self):
        return self._file if self._file is not None else sys.stderr

    def set_colors(self, preference):
        if preference == 'always':
            colors = TreeColors
        elif preference == 'auto':
            isatty = getattr(self.logfile, 'isatty', None)
            colors = TreeColors if isatty is not None and isatty() else NoColors
        elif preference == 'never':
            colors = NoColors
        else:
            raise ValueError("invalid color preference: " + str(preference))
        self.colors = colors()
        self._colormap = {
                LOG_DEBUG2: self.colors.OUTCOME,
                LOG_DEBUG3: self.colors.DETACH,
            }

    def _compile_msg(self, level, *msg):
        l = [self.prefix]
        l.extend(map(str, msg))
        l = self.colors.wrap_list(self._colormap.get(level, ''), l)
        l.append("\n")
        return ''.join(l)

    def enabled_for(self, level):
        return level <= self.loglevel

    def do_log(self, level, *msg):
        if not self.enabled_for(level):
            return
        self.logfile.write(self._compile_msg(level, *msg))


class NoColors:
    RESET   = ''
    OUTCOME = ''
    DETACH  = ''

    def wrap_list(self, color, l):
        return l

class TreeColors(NoColors):
    RESET   = '\033[0m'
    OUTCOME = '\033[36m'
    DETACH  = '\033[35m'

    def wrap_list(self, color, l):
        if not color:
            return l
        l.insert(0, color)
        l.append(self.RESET)
        return l


logger = Logger()
