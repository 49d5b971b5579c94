"""Schema tree flattening service.

Walks `properties`, `patternProperties` and `$ref` from a root node and
records one entry per walked property, keyed by its flat path. Referenced
nodes are flattened under the referencing path, not the target's own path.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from schema_docgen.reference_resolution import (
    ReferenceResolutionError,
    ReferenceResolver,
)
from schema_docgen.reference_resolution.reference_models import PointerTarget
from schema_docgen.schema_loading import SchemaRegistry

from .flatten_models import FlattenedProperty, FlattenResult, NoticeKind, TraversalNotice
from .path_segments import FlatPath, format_flat_path, normalize_flat_path, normalize_segment

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

_CONTAINER_KEYS = ("properties", "patternProperties")


@dataclass
class _TraversalState:
    """Accumulator for one flatten call."""

    entries: dict[FlatPath, FlattenedProperty] = field(default_factory=dict)
    notices: list[TraversalNotice] = field(default_factory=list)

    def record(self, segments: FlatPath, node: Any, document_key: str) -> None:
        if segments in self.entries:
            # placeholder collision: keep the first position, last writer's node
            _LOGGER.debug("Path %s declared more than once", format_flat_path(segments))
        self.entries[segments] = FlattenedProperty(
            segments=segments, node=node, document_key=document_key
        )

    def notice(
        self, kind: NoticeKind, segments: FlatPath, reference: str | None, detail: str
    ) -> None:
        self.notices.append(
            TraversalNotice(
                kind=kind, path=format_flat_path(segments), reference=reference, detail=detail
            )
        )

    def freeze(self) -> FlattenResult:
        return FlattenResult(properties=tuple(self.entries.values()), notices=tuple(self.notices))


@dataclass(frozen=True)
class _TraversalContext:
    resolver: ReferenceResolver
    max_depth: int


@dataclass(frozen=True)
class _Target:
    """Node reached after following references, with the call-path guard to use below it."""

    node: Any
    document_key: str
    active: frozenset[PointerTarget]
    expandable: bool


def flatten_schema_tree(
    root: Any,
    registry: SchemaRegistry,
    *,
    root_prefix: str = "/",
    document_key: str | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    resolver: ReferenceResolver | None = None,
) -> FlattenResult:
    """Flatten `root` into a flat path to resolved node mapping.

    Args:
      root: Schema node to walk.
      registry: Documents available to `$ref` resolution.
      root_prefix: Flat path the root's own properties are placed under.
      document_key: Document `root` belongs to; defaults to the registry entry.
      max_depth: Path length beyond which subtrees are truncated.
      resolver: Resolver to reuse; a permissive one is created when omitted.

    Returns:
      Properties in traversal order plus notices for truncated subtrees and
      partially resolved pointers.

    Raises:
      ReferenceResolutionError: For malformed references or unknown documents,
        with the offending flat path attached.
    """
    owning_key = registry.entry_key if document_key is None else document_key
    context = _TraversalContext(
        resolver=resolver or ReferenceResolver(registry), max_depth=max_depth
    )
    state = _TraversalState()

    active: frozenset[PointerTarget] = frozenset()
    if owning_key in registry and registry[owning_key] is root:
        active = frozenset({(owning_key, ())})

    if isinstance(root, Mapping):
        _expand_node(
            root,
            prefix=normalize_flat_path(root_prefix),
            document_key=owning_key,
            active=active,
            state=state,
            context=context,
        )
    return state.freeze()


def _expand_node(
    node: Mapping[str, Any],
    *,
    prefix: FlatPath,
    document_key: str,
    active: frozenset[PointerTarget],
    state: _TraversalState,
    context: _TraversalContext,
) -> None:
    _expand_containers(
        node, prefix=prefix, document_key=document_key, active=active, state=state, context=context
    )
    if "$ref" in node:
        _merge_reference(
            node["$ref"],
            prefix=prefix,
            document_key=document_key,
            active=active,
            state=state,
            context=context,
        )


def _expand_containers(
    node: Mapping[str, Any],
    *,
    prefix: FlatPath,
    document_key: str,
    active: frozenset[PointerTarget],
    state: _TraversalState,
    context: _TraversalContext,
) -> None:
    for container_key in _CONTAINER_KEYS:
        children = node.get(container_key)
        if not isinstance(children, Mapping):
            continue
        for key, child in children.items():
            segment = normalize_segment(
                str(key), from_pattern_properties=container_key == "patternProperties"
            )
            _expand_child(
                child,
                path=prefix + (segment,),
                document_key=document_key,
                active=active,
                state=state,
                context=context,
            )


def _expand_child(
    child: Any,
    *,
    path: FlatPath,
    document_key: str,
    active: frozenset[PointerTarget],
    state: _TraversalState,
    context: _TraversalContext,
) -> None:
    if not isinstance(child, Mapping):
        state.record(path, child, document_key)
        return
    if "$ref" not in child:
        state.record(path, child, document_key)
        _descend(
            child, path=path, document_key=document_key, active=active, state=state, context=context
        )
        return

    try:
        target = _dereference(
            {"$ref": child["$ref"]}, document_key, active, path=path, state=state, context=context
        )
    except ReferenceResolutionError as exc:
        exc.locate(format_flat_path(path))
        raise

    state.record(path, _overlay_local_keys(target.node, child), target.document_key)
    expand_target = target.expandable and _has_nested_properties(target.node)
    if not expand_target and not _has_nested_properties(child):
        return
    if _depth_exhausted(path, state, context):
        return
    # local containers first, then the target's at the same prefix
    _expand_containers(
        child, prefix=path, document_key=document_key, active=active, state=state, context=context
    )
    if expand_target:
        _expand_node(
            target.node,
            prefix=path,
            document_key=target.document_key,
            active=target.active,
            state=state,
            context=context,
        )


def _descend(
    node: Mapping[str, Any],
    *,
    path: FlatPath,
    document_key: str,
    active: frozenset[PointerTarget],
    state: _TraversalState,
    context: _TraversalContext,
) -> None:
    if not _has_nested_properties(node) or _depth_exhausted(path, state, context):
        return
    _expand_node(
        node, prefix=path, document_key=document_key, active=active, state=state, context=context
    )


def _depth_exhausted(path: FlatPath, state: _TraversalState, context: _TraversalContext) -> bool:
    if len(path) < context.max_depth:
        return False
    state.notice(
        NoticeKind.RECURSION_LIMIT_EXCEEDED,
        path,
        None,
        f"Maximum depth {context.max_depth} reached; subtree truncated.",
    )
    return True


def _overlay_local_keys(target_node: Any, child: Mapping[str, Any]) -> Any:
    """Return the resolved node with the keys written next to `$ref` laid over it.

    Containers are merged one level deep so the recorded node lists both the
    local and the referenced children. Without local keys the target itself
    is returned.
    """
    local = {key: value for key, value in child.items() if key != "$ref"}
    if not local or not isinstance(target_node, Mapping):
        return target_node
    merged = dict(target_node)
    for key, value in local.items():
        if key in _CONTAINER_KEYS and isinstance(value, Mapping) and isinstance(
            merged.get(key), Mapping
        ):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _merge_reference(
    raw_ref: Any,
    *,
    prefix: FlatPath,
    document_key: str,
    active: frozenset[PointerTarget],
    state: _TraversalState,
    context: _TraversalContext,
) -> None:
    """Expand the target of a node's own `$ref` into the node's path namespace."""
    try:
        target = _dereference(
            {"$ref": raw_ref}, document_key, active, path=prefix, state=state, context=context
        )
    except ReferenceResolutionError as exc:
        exc.locate(format_flat_path(prefix))
        raise

    if target.expandable and _has_nested_properties(target.node):
        _expand_node(
            target.node,
            prefix=prefix,
            document_key=target.document_key,
            active=target.active,
            state=state,
            context=context,
        )


def _dereference(
    node: Mapping[str, Any],
    document_key: str,
    active: frozenset[PointerTarget],
    *,
    path: FlatPath,
    state: _TraversalState,
    context: _TraversalContext,
) -> _Target:
    """Follow a chain of pure reference nodes to the node they designate."""
    current: Any = node
    owner = document_key
    guard = active
    while _is_pure_reference(current):
        resolved = context.resolver.resolve(current["$ref"], owner)
        reference = resolved.reference
        if not resolved.complete:
            state.notice(
                NoticeKind.UNRESOLVABLE_POINTER_SEGMENT,
                path,
                reference.raw,
                f"Pointer segment '{resolved.missing_segment}' not found; "
                "using the deepest node reached.",
            )
        if reference.target in guard:
            state.notice(
                NoticeKind.RECURSION_LIMIT_EXCEEDED,
                path,
                reference.raw,
                "Reference cycle detected; subtree truncated.",
            )
            return _Target(resolved.node, reference.document_key, guard, expandable=False)
        guard = guard | {reference.target}
        current = resolved.node
        owner = reference.document_key
    return _Target(current, owner, guard, expandable=True)


def _is_pure_reference(node: Any) -> bool:
    return (
        isinstance(node, Mapping)
        and "$ref" in node
        and not any(isinstance(node.get(key), Mapping) for key in _CONTAINER_KEYS)
    )


def _has_nested_properties(node: Any) -> bool:
    return isinstance(node, Mapping) and any(
        isinstance(node.get(key), Mapping) for key in _CONTAINER_KEYS
    )
