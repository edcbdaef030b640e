# src/netlist_core/parser/extraction.py
"""
Maps the generic labeled tree onto the raw netlist records.

Each `extract_*` function reads one record kind through the query layer of
`Labeled`. A required field that is absent surfaces the query layer's own
`MissingChildError`/`MissingValueError` unchanged. Only the footprint, the
pin function of a node, the pin list of a part and the design header are
optional; an optional field that is present but empty, as in `(footprint)`,
reads as absent.
"""
import logging
from typing import Optional

from .exceptions import MissingChildError, MissingValueError, UnexpectedRootLabelError, UnknownVersionError
from .raw_data import (
    PartId,
    RawComponent,
    RawDesign,
    RawNet,
    RawNetList,
    RawNode,
    RawPart,
    RawPin,
)
from .tree import Labeled

logger = logging.getLogger(__name__)

ROOT_LABEL = "export"
SUPPORTED_VERSION = "E"


def _optional_value(node: Labeled, label: str) -> Optional[str]:
    try:
        return node.value(label)
    except (MissingChildError, MissingValueError):
        return None


def _optional_child(node: Labeled, label: str) -> Optional[Labeled]:
    try:
        return node.child(label)
    except MissingChildError:
        return None


def extract_component(node: Labeled) -> RawComponent:
    """Reads one `comp` entry."""
    libsource = node.child("libsource")
    properties = tuple(
        (prop.value("name"), prop.value("value"))
        for prop in node.children("property")
    )
    return RawComponent(
        ref_des=node.value("ref"),
        value=node.value("value"),
        part_id=PartId(libsource.value("lib"), libsource.value("part")),
        properties=properties,
        footprint=_optional_value(node, "footprint"),
    )


def extract_pin(node: Labeled) -> RawPin:
    return RawPin(num=node.value("num"), name=node.value("name"), pin_type=node.value("type"))


def extract_part(node: Labeled) -> RawPart:
    """Reads one `libpart` entry. A part without a `pins` list has no pins."""
    pins_node = _optional_child(node, "pins")
    pins = tuple(extract_pin(pin) for pin in pins_node.children("pin")) if pins_node is not None else ()
    return RawPart(
        part_id=PartId(node.value("lib"), node.value("part")),
        description=node.value("description"),
        pins=pins,
    )


def extract_node(node: Labeled) -> RawNode:
    return RawNode(
        ref_des=node.value("ref"),
        pin_num=node.value("pin"),
        pin_type=node.value("pintype"),
        pin_function=_optional_value(node, "pinfunction"),
    )


def extract_net(node: Labeled) -> RawNet:
    return RawNet(
        code=node.value("code"),
        name=node.value("name"),
        nodes=tuple(extract_node(n) for n in node.children("node")),
    )


def extract_design(node: Labeled) -> RawDesign:
    return RawDesign(
        source=_optional_value(node, "source"),
        date=_optional_value(node, "date"),
        tool=_optional_value(node, "tool"),
    )


def extract_netlist(root: Labeled, supported_version: str = SUPPORTED_VERSION) -> RawNetList:
    """
    Reads a whole `export` tree.

    The root label and the version are checked before anything else, so a
    file in another format is rejected without touching its sections.
    """
    if not root.has_label(ROOT_LABEL):
        raise UnexpectedRootLabelError(root.label)

    version = root.value("version")
    if version != supported_version:
        raise UnknownVersionError(version)

    design_node = _optional_child(root, "design")
    design = extract_design(design_node) if design_node is not None else None

    components = tuple(extract_component(c) for c in root.child("components").children("comp"))
    parts = tuple(extract_part(p) for p in root.child("libparts").children("libpart"))
    nets = tuple(extract_net(n) for n in root.child("nets").children("net"))

    logger.debug(
        "Extracted %d components, %d parts and %d nets (version %s).",
        len(components), len(parts), len(nets), version,
    )
    return RawNetList(components=components, parts=parts, nets=nets, design=design)
