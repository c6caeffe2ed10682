"""Resource trees and their flattened key-path index.

A parsed namespace file is converted once into an explicit tree of
`Node` / `TextLeaf` / `ArrayLeaf` / `ScalarLeaf` values. Arrays are opaque
leaves: flattening never descends into them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class TextLeaf:
    value: str


@dataclass(frozen=True)
class ArrayLeaf:
    items: tuple[Any, ...]


@dataclass(frozen=True)
class ScalarLeaf:
    """Number, boolean or null leaf. Tolerated but never compared as text."""

    value: Any


@dataclass(frozen=True)
class Node:
    children: dict[str, "ResourceTree"] = field(default_factory=dict)


Leaf = Union[TextLeaf, ArrayLeaf, ScalarLeaf]
ResourceTree = Union[Node, TextLeaf, ArrayLeaf, ScalarLeaf]


def build_tree(raw: Any) -> ResourceTree:
    """Convert parsed JSON data into a `ResourceTree`."""

    if isinstance(raw, dict):
        return Node(children={str(k): build_tree(v) for k, v in raw.items()})
    if isinstance(raw, list):
        return ArrayLeaf(items=tuple(raw))
    if isinstance(raw, str):
        return TextLeaf(value=raw)
    return ScalarLeaf(value=raw)


@dataclass
class NamespaceIndex:
    """Flattened view of one (locale, namespace) tree.

    `paths` keeps the insertion order of the source file; `values` maps each
    dot-joined key path to its leaf.
    """

    paths: list[str] = field(default_factory=list)
    values: dict[str, Leaf] = field(default_factory=dict)

    def __contains__(self, path: object) -> bool:
        return path in self.values

    def __len__(self) -> int:
        return len(self.paths)

    def text(self, path: str) -> str | None:
        """Return the string value at `path`, or None for non-text/absent leaves."""

        leaf = self.values.get(path)
        if isinstance(leaf, TextLeaf):
            return leaf.value
        return None

    def iter_text(self):
        for path in self.paths:
            leaf = self.values[path]
            if isinstance(leaf, TextLeaf):
                yield path, leaf.value


def flatten(tree: ResourceTree, prefix: str = "") -> NamespaceIndex:
    """Flatten `tree` into ordered leaf key paths.

    An empty `Node` contributes no paths. A non-Node root is a single leaf
    addressed by `prefix`.
    """

    index = NamespaceIndex()
    _collect(tree, prefix, index)
    return index


def _collect(tree: ResourceTree, prefix: str, index: NamespaceIndex) -> None:
    if isinstance(tree, Node):
        for key, child in tree.children.items():
            _collect(child, f"{prefix}.{key}" if prefix else key, index)
        return
    if prefix in index.values:
        return
    index.paths.append(prefix)
    index.values[prefix] = tree


EMPTY_TREE = Node()


@dataclass
class ResourceSet:
    """All loaded resources of one run.

    `reference` is the index used as the comparison basis for every target
    locale. Absent or unparsable namespaces are present as empty indexes.
    """

    reference_locale: str
    namespaces: tuple[str, ...]
    reference: dict[str, NamespaceIndex] = field(default_factory=dict)
    targets: dict[str, dict[str, NamespaceIndex]] = field(default_factory=dict)

    @property
    def target_locales(self) -> list[str]:
        return list(self.targets)

    def reference_index(self, namespace: str) -> NamespaceIndex:
        return self.reference.get(namespace) or NamespaceIndex()

    def target_index(self, locale: str, namespace: str) -> NamespaceIndex:
        return self.targets.get(locale, {}).get(namespace) or NamespaceIndex()

    def iter_targets(self):
        """Yield `(locale, namespace, reference_index, target_index)` in load order."""

        for locale in self.targets:
            for namespace in self.namespaces:
                yield locale, namespace, self.reference_index(namespace), self.target_index(locale, namespace)
