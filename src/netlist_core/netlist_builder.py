# src/netlist_core/netlist_builder.py

"""
Defines the NetlistResolver, which turns the raw records extracted from a
netlist export into the fully cross-referenced `NetList` model, and `parse()`,
the single entry point running the whole pipeline.

Architectural Role:
The resolver is the bridge between the raw IR (a faithful copy of the file's
sections) and the model the rest of an application works with. It:

1.  **Maps Records:** Copies every raw component, part and net into its model
    type, mapping pin-type strings onto `PinType`.

2.  **Links Components:** Joins each component with its part and each of the
    part's pins with the net that carries it, producing the component's pin
    list in part order.

3.  **Back-References Parts:** Records, on every part, which components use it.

Resolution is strict. The first missing link raises a `NetlistLinkageError`
and no partial model is returned; a complete export never has gaps.
"""

import logging
from typing import Dict, List, Optional, Tuple, Union

from .config import NetlistConfig
from .data_structures import (
    Component,
    ComponentPin,
    DesignInfo,
    Net,
    NetList,
    Node,
    Part,
    PartPin,
)
from .errors import MissingNetError, MissingPartError, UnusedPartError
from .parser.extraction import extract_netlist
from .parser.raw_data import PartId, RawComponent, RawNet, RawNetList, RawPart
from .parser.sexpr_parser import parse_sexpr
from .pin_types import PinType

logger = logging.getLogger(__name__)


class NetlistResolver:
    """
    Resolves a `RawNetList` into a `NetList`.

    The steps run in a fixed order so that, for a given input, the same error
    is always the one reported.
    """

    def resolve(self, raw: RawNetList) -> NetList:
        logger.debug("Step 1: mapping %d components and %d parts...", len(raw.components), len(raw.parts))
        parts = [self._map_part(p) for p in raw.parts]

        logger.debug("Step 2: mapping %d nets...", len(raw.nets))
        nets = [self._map_net(n) for n in raw.nets]

        logger.debug("Step 3: linking components to parts and nets...")
        parts_by_id: Dict[PartId, Part] = {}
        for part in parts:
            parts_by_id.setdefault(part.part_id, part)
        pin_index = self._build_pin_index(nets)
        components = [self._link_component(c, parts_by_id, pin_index) for c in raw.components]

        logger.debug("Step 4: collecting part back-references...")
        parts = [self._attach_components(p, components) for p in parts]

        design = None
        if raw.design is not None:
            design = DesignInfo(source=raw.design.source, date=raw.design.date, tool=raw.design.tool)

        return NetList(components=components, parts=parts, nets=nets, design=design)

    # --- Step 1 & 2: record mapping ---

    @staticmethod
    def _map_part(raw_part: RawPart) -> Part:
        pins = tuple(
            PartPin(num=pin.num, name=pin.name, pin_type=PinType.from_netlist(pin.pin_type))
            for pin in raw_part.pins
        )
        return Part(part_id=raw_part.part_id, description=raw_part.description, pins=pins, components=frozenset())

    @staticmethod
    def _map_net(raw_net: RawNet) -> Net:
        nodes = tuple(
            Node(
                ref_des=node.ref_des,
                pin_num=node.pin_num,
                pin_type=PinType.from_netlist(node.pin_type),
                pin_function=node.pin_function,
            )
            for node in raw_net.nodes
        )
        return Net(code=raw_net.code, name=raw_net.name, nodes=nodes)

    # --- Step 3: linkage ---

    @staticmethod
    def _build_pin_index(nets: List[Net]) -> Dict[Tuple[str, str], str]:
        """Maps (ref_des, pin_num) to the name of the first net that mentions it."""
        index: Dict[Tuple[str, str], str] = {}
        for net in nets:
            for node in net.nodes:
                index.setdefault((node.ref_des, node.pin_num), net.name)
        return index

    @staticmethod
    def _link_component(
        raw_component: RawComponent,
        parts_by_id: Dict[PartId, Part],
        pin_index: Dict[Tuple[str, str], str],
    ) -> Component:
        part = parts_by_id.get(raw_component.part_id)
        if part is None:
            raise MissingPartError(ref_des=raw_component.ref_des, part_id=raw_component.part_id)

        pins: List[ComponentPin] = []
        for part_pin in part.pins:
            net_name = pin_index.get((raw_component.ref_des, part_pin.num))
            if net_name is None:
                raise MissingNetError(ref_des=raw_component.ref_des, pin_num=part_pin.num)
            pins.append(ComponentPin(num=part_pin.num, name=part_pin.name, pin_type=part_pin.pin_type, net_name=net_name))

        return Component(
            ref_des=raw_component.ref_des,
            value=raw_component.value,
            part_id=raw_component.part_id,
            properties=raw_component.properties,
            footprint=raw_component.footprint,
            pins=tuple(pins),
        )

    # --- Step 4: part back-references ---

    @staticmethod
    def _attach_components(part: Part, components: List[Component]) -> Part:
        users = frozenset(c.ref_des for c in components if c.part_id == part.part_id)
        if not users:
            raise UnusedPartError(part_id=part.part_id)
        return Part(part_id=part.part_id, description=part.description, pins=part.pins, components=users)


def parse(source: Union[str, bytes], config: Optional[NetlistConfig] = None) -> NetList:
    """
    Parses the text of a netlist export into a resolved `NetList`.

    Args:
        source: The complete export text, or its UTF-8 bytes. Error spans are
            byte offsets into the UTF-8 encoding either way.
        config: Optional settings; the supported format version is taken from it.

    Raises:
        NetlistParseError: Any lexical, syntactic, structural, domain or
            linkage error. The first error found is the one raised.
    """
    config = config or NetlistConfig()

    root = parse_sexpr(source)
    raw = extract_netlist(root, config.supported_version)
    netlist = NetlistResolver().resolve(raw)

    logger.info(
        "Parsed netlist with %d components, %d parts and %d nets.",
        len(netlist.components), len(netlist.parts), len(netlist.nets),
    )
    return netlist

