import os
import sys
import threading
from bs4 import BeautifulSoup
from fgpf1.constants import DB_FILENAME, FALLBACK_DIR


class DocumentNotFound(FileNotFoundError):
    pass


def get_fallback_dir():
    return os.path.abspath(os.path.expanduser(FALLBACK_DIR))


def stderr_log(message):
    sys.stderr.write("%s\n" % message)


def load_document(path):
    try:
        with open(path, 'rb') as fp:
            data = fp.read()
    except FileNotFoundError:
        raise DocumentNotFound("XML database not found at '%s'." % path)
    return BeautifulSoup(data, "xml")


class DocumentCache():
    """
    Holds the parsed db.xml and re-reads it when the file's mtime advances.

    The file is looked up in base_dir first, then in fallback_dir
    (~/.fgpf1 unless given). The cached (document, mtime, path) tuple is
    replaced as a whole on reload, so a caller holding a document keeps a
    complete tree even while another thread reloads.
    """

    def __init__(self, base_dir=None, filename=DB_FILENAME,
                 fallback_dir=None, log=stderr_log):
        self.base_dir = os.path.abspath(base_dir or os.getcwd())
        self.filename = filename
        self.fallback_dir = os.path.abspath(fallback_dir or get_fallback_dir())
        self.log = log
        self._lock = threading.Lock()
        self._state = None

    def locate(self):
        primary = os.path.join(self.base_dir, self.filename)
        fallback = os.path.join(self.fallback_dir, self.filename)
        for path in [primary, fallback]:
            if os.path.isfile(path):
                return path
        raise DocumentNotFound("XML database not found at '%s'." % primary)

    def _is_current(self, state, path, mtime):
        return state is not None and state[2] == path and mtime <= state[1]

    def load(self):
        path = self.locate()
        try:
            mtime = os.stat(path).st_mtime_ns
        except FileNotFoundError:
            raise DocumentNotFound("XML database not found at '%s'." % path)
        state = self._state
        if self._is_current(state, path, mtime):
            return state[0]
        with self._lock:
            state = self._state
            if self._is_current(state, path, mtime):
                return state[0]
            if self.log:
                self.log("Loading XML database from %s" % path)
            document = load_document(path)
            self._state = (document, mtime, path)
            return document
