import logging
import os

from persistent_trie._version import version as __version__  # noqa: F401

DEFAULT_LOG_LEVEL = "INFO"


def get_log_level():
    # PERSISTENT_TRIE_LOG_LEVEL takes a level name; anything unknown falls back to INFO
    name = os.environ.get("PERSISTENT_TRIE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


log = logging.getLogger("persistent_trie")
log.setLevel(get_log_level())

# the handler stays on the package logger so importing the library leaves the
# host application's root logger alone
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("[%(levelname)-.1s %(asctime)s %(name)s] %(message)s"))
log.addHandler(handler)

from persistent_trie.node import BoxedValue, FrozenNodeError, TrieNode, TrieNodeWithValue  # noqa: E402, F401
from persistent_trie.trie import Trie, key_to_path  # noqa: E402, F401
