import types
import typing


class FrozenNodeError(RuntimeError):
    """Raised when a node reachable from a published Trie is mutated in place."""


class BoxedValue:
    # opaque handle around one stored value, of any type
    __slots__ = ("_value",)

    def __init__(self, value):
        self._value = value

    def extract(self, value_type=object, default=None):
        # hand the value back only when it is exactly of the requested type;
        # object asks for anything
        actual = type(self._value)
        if value_type is object:
            return self._value
        if isinstance(value_type, tuple):
            return self._value if actual in value_type else default
        return self._value if actual is value_type else default

    def __repr__(self):
        return f"BoxedValue({type(self._value).__name__})"


class TrieNode:
    """A branching node: one child per key element, no value.

    Nodes are shared between Trie versions. Once a node is frozen it is
    reachable from a published Trie and its children must never change; a
    write has to go through clone() first.
    """

    is_value_node = False

    __slots__ = ("_children", "_frozen")

    def __init__(self, children=None):
        self._children: typing.Dict[typing.Hashable, TrieNode] = dict(children or {})
        self._frozen = False

    @property
    def children(self) -> typing.Mapping[typing.Hashable, "TrieNode"]:
        # read-only view, writes go through insert_child_node/remove_child_node
        return types.MappingProxyType(self._children)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def has_child(self, c) -> bool:
        return c in self._children

    def has_children(self) -> bool:
        return len(self._children) > 0

    def get_child_node(self, c) -> typing.Optional["TrieNode"]:
        return self._children.get(c)

    def insert_child_node(self, c, node: "TrieNode"):
        self._check_writable()
        self._children[c] = node

    def remove_child_node(self, c):
        self._check_writable()
        # a missing child is already removed
        self._children.pop(c, None)

    def clone(self) -> "TrieNode":
        return TrieNode(self._children)

    def with_value(self, boxed: BoxedValue) -> "TrieNodeWithValue":
        return TrieNodeWithValue(boxed, self._children)

    def without_value(self) -> "TrieNode":
        return TrieNode(self._children)

    def freeze(self):
        # walk down through everything not yet published; frozen subtrees
        # were frozen as a whole when their own Trie was built
        pending = [self]
        while pending:
            node = pending.pop()
            if node._frozen:
                continue
            node._frozen = True
            pending.extend(child for child in node._children.values() if not child._frozen)

    def _check_writable(self):
        if self._frozen:
            raise FrozenNodeError(f"{self!r} is shared by a published trie, clone it before writing")

    def __repr__(self):
        return f"<{type(self).__name__} children={sorted(map(repr, self._children))}>"


class TrieNodeWithValue(TrieNode):
    """A node that terminates a stored key and holds that key's value."""

    is_value_node = True

    __slots__ = ("_value",)

    def __init__(self, value: BoxedValue, children=None):
        super().__init__(children)
        self._value = value

    @property
    def value(self) -> BoxedValue:
        return self._value

    def value_as(self, value_type=object, default=None):
        return self._value.extract(value_type, default)

    def clone(self) -> "TrieNodeWithValue":
        # the box is shared, not copied
        return TrieNodeWithValue(self._value, self._children)
