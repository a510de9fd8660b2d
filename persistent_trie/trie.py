import logging
import typing

from persistent_trie.node import BoxedValue, TrieNode, TrieNodeWithValue

log = logging.getLogger(__name__)


def key_to_path(key) -> tuple:
    # turn "abc" into ('a', 'b', 'c') and b"ab" into (97, 98)
    if isinstance(key, (str, bytes)):
        return tuple(key)
    raise TypeError(f"trie keys must be str or bytes, not {type(key).__name__}")


class Trie:
    """An immutable prefix tree.

    put() and remove() never touch the receiver. They clone the nodes along
    the key's path and return a new Trie; every other subtree is shared with
    the version it came from.
    """

    __slots__ = ("_root",)

    def __init__(self, root: typing.Optional[TrieNode] = None):
        if root is not None:
            root.freeze()
        self._root = root

    @property
    def root(self) -> typing.Optional[TrieNode]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def get(self, key, value_type=object, default=None):
        # return the value stored at key if it is a value_type, else default
        node = self._find(key_to_path(key))
        if node is None or not node.is_value_node:
            return default
        return node.value_as(value_type, default)

    def put(self, key, value) -> "Trie":
        path = key_to_path(key)
        boxed = BoxedValue(value)

        if len(path) == 0:
            # the root itself carries the value for the empty key
            root = self._root if self._root is not None else TrieNode()
            return Trie(root.with_value(boxed))

        new_root = self._root.clone() if self._root is not None else TrieNode()
        node = new_root
        *init, last = path
        for c in init:
            child = node.get_child_node(c)
            child = TrieNode() if child is None else child.clone()
            node.insert_child_node(c, child)
            node = child

        child = node.get_child_node(last)
        # overwriting keeps whatever is below the key
        node.insert_child_node(last, TrieNodeWithValue(boxed) if child is None else child.with_value(boxed))
        return Trie(new_root)

    def remove(self, key) -> "Trie":
        path = key_to_path(key)
        target = self._find(path)
        if target is None or not target.is_value_node:
            # nothing is stored at key, share the whole structure
            log.debug(f"remove({key!r}): key not present, trie unchanged")
            return Trie(self._root)

        if len(path) == 0:
            new_root = target.without_value()
        else:
            new_root = self._root.clone()
            # (element, parent) for every step down, unwound afterwards
            visited: typing.List[typing.Tuple[typing.Hashable, TrieNode]] = []
            node = new_root
            *init, last = path
            for c in init:
                child = node.get_child_node(c).clone()
                node.insert_child_node(c, child)
                visited.append((c, node))
                node = child

            node.insert_child_node(last, node.get_child_node(last).without_value())
            visited.append((last, node))

            for c, parent in reversed(visited):
                child = parent.get_child_node(c)
                if child.is_value_node or child.has_children():
                    # anything left below stops the pruning
                    break
                parent.remove_child_node(c)

        if not new_root.is_value_node and not new_root.has_children():
            log.debug(f"remove({key!r}): trie is now empty")
            return Trie()
        return Trie(new_root)

    def _find(self, path) -> typing.Optional[TrieNode]:
        node = self._root
        for c in path:
            if node is None:
                return None
            node = node.get_child_node(c)
        return node

    def __contains__(self, key) -> bool:
        node = self._find(key_to_path(key))
        return node is not None and node.is_value_node

    def __repr__(self):
        if self._root is None:
            return "<Trie empty>"
        return f"<Trie root={self._root!r}>"
