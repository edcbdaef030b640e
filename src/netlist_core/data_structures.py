# src/netlist_core/data_structures.py
# Required for forward references in type hints.
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Optional, Tuple

from .parser.raw_data import PartId
from .pin_types import PinType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartPin:
    """A pin as declared by a library part."""
    num: str
    name: str
    pin_type: PinType


@dataclass(frozen=True)
class ComponentPin:
    """A pin of a placed component, joined with the net it is attached to."""
    num: str
    name: str
    pin_type: PinType
    net_name: str


@dataclass(frozen=True)
class Component:
    """
    One placed schematic instance.

    `pins` follows the pin order of the component's part, not the order in
    which the nets mention them.
    """
    ref_des: str
    value: str
    part_id: PartId
    properties: Tuple[Tuple[str, str], ...]
    footprint: Optional[str]
    pins: Tuple[ComponentPin, ...]

    def get_pin(self, num: str) -> Optional[ComponentPin]:
        for pin in self.pins:
            if pin.num == num:
                return pin
        return None


@dataclass(frozen=True)
class Part:
    """
    A reusable library part and the ref-des of every component that uses it.

    `components` is a non-owning back reference and is never empty in a
    netlist that came out of the resolver or the mutation engine.
    """
    part_id: PartId
    description: str
    pins: Tuple[PartPin, ...]
    components: FrozenSet[str]


@dataclass(frozen=True)
class Node:
    """One (component, pin) attachment of a net."""
    ref_des: str
    pin_num: str
    pin_type: PinType
    pin_function: Optional[str] = None


@dataclass(frozen=True)
class Net:
    code: str
    name: str
    nodes: Tuple[Node, ...]


@dataclass(frozen=True)
class DesignInfo:
    source: Optional[str] = None
    date: Optional[str] = None
    tool: Optional[str] = None


@dataclass
class NetList:
    """
    The resolved, fully cross-referenced netlist.

    Entities are immutable. The containing collections change only through
    `remove_component` and `remove_components`, which keep every cross
    reference consistent:

    - every component's part is present in `parts`;
    - every part is used by at least one component;
    - every component pin has a matching node in some net;
    - every net has at least one node.
    """
    components: List[Component]
    parts: List[Part]
    nets: List[Net]
    design: Optional[DesignInfo] = field(default=None)

    # --- Read accessors ---

    def get_component(self, ref_des: str) -> Optional[Component]:
        for component in self.components:
            if component.ref_des == ref_des:
                return component
        return None

    def get_part(self, part_id: PartId) -> Optional[Part]:
        for part in self.parts:
            if part.part_id == part_id:
                return part
        return None

    def get_net(self, name: str) -> Optional[Net]:
        for net in self.nets:
            if net.name == name:
                return net
        return None

    def part_for(self, ref_des: str) -> Optional[Part]:
        """Returns the part instantiated by the component `ref_des`, if placed."""
        component = self.get_component(ref_des)
        if component is None:
            return None
        return self.get_part(component.part_id)

    def net_for_pin(self, ref_des: str, pin_num: str) -> Optional[Net]:
        """Returns the first net (in document order) attached to the given pin."""
        for net in self.nets:
            for node in net.nodes:
                if node.ref_des == ref_des and node.pin_num == pin_num:
                    return net
        return None

    # --- Mutation engine ---

    def remove_component(self, ref_des: str) -> None:
        """
        Removes one component and everything that only existed because of it.

        Removing a ref-des that is not in the netlist does nothing.
        """
        self.remove_components([ref_des])

    def remove_components(self, ref_des_list: Iterable[str]) -> None:
        """
        Removes a set of components in one step.

        Which parts become unused is decided once, against the part membership
        as it was before the call. A part is dropped only when none of its
        components survive the batch.

        A single ref-des string is treated as a batch of one.
        """
        if isinstance(ref_des_list, str):
            ref_des_list = [ref_des_list]
        targets = set(ref_des_list)
        targets.intersection_update(c.ref_des for c in self.components)
        if not targets:
            logger.debug("No matching components to remove; netlist unchanged.")
            return

        self.components = [c for c in self.components if c.ref_des not in targets]

        kept_nets: List[Net] = []
        pruned_nets: List[str] = []
        for net in self.nets:
            nodes = tuple(n for n in net.nodes if n.ref_des not in targets)
            if not nodes:
                pruned_nets.append(net.name)
            elif len(nodes) == len(net.nodes):
                kept_nets.append(net)
            else:
                kept_nets.append(replace(net, nodes=nodes))
        self.nets = kept_nets

        kept_parts: List[Part] = []
        pruned_parts: List[str] = []
        for part in self.parts:
            remaining = part.components - targets
            if not remaining:
                pruned_parts.append(str(part.part_id))
            elif remaining == part.components:
                kept_parts.append(part)
            else:
                kept_parts.append(replace(part, components=frozenset(remaining)))
        self.parts = kept_parts

        logger.debug(
            "Removed components %s; pruned nets %s and parts %s.",
            sorted(targets), pruned_nets, pruned_parts,
        )
