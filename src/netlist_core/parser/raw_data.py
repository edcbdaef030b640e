# src/netlist_core/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# The classes in this module define the raw Intermediate Representation (IR):
# the netlist schema as written, before any cross-linking. They are the
# contract between the extraction stage and the NetlistResolver. Pin types are
# still the exporter's strings here; the resolver maps them.


@dataclass(frozen=True)
class PartId:
    """Compound key of a library part."""
    lib: str
    part: str

    def __str__(self):
        return f"{self.lib}:{self.part}"


@dataclass(frozen=True)
class RawComponent:
    """IR for one placed schematic instance (`comp`)."""
    ref_des: str
    value: str
    part_id: PartId
    properties: Tuple[Tuple[str, str], ...]
    footprint: Optional[str] = None


@dataclass(frozen=True)
class RawPin:
    """IR for one pin of a library part."""
    num: str
    name: str
    pin_type: str


@dataclass(frozen=True)
class RawPart:
    """IR for one library part (`libpart`)."""
    part_id: PartId
    description: str
    pins: Tuple[RawPin, ...] = ()


@dataclass(frozen=True)
class RawNode:
    """IR for one (component, pin) attachment of a net."""
    ref_des: str
    pin_num: str
    pin_type: str
    pin_function: Optional[str] = None


@dataclass(frozen=True)
class RawNet:
    """IR for one electrical net."""
    code: str
    name: str
    nodes: Tuple[RawNode, ...]


@dataclass(frozen=True)
class RawDesign:
    """IR for the optional `design` header."""
    source: Optional[str] = None
    date: Optional[str] = None
    tool: Optional[str] = None


@dataclass(frozen=True)
class RawNetList:
    """Top-level IR node representing one parsed netlist export."""
    components: Tuple[RawComponent, ...]
    parts: Tuple[RawPart, ...]
    nets: Tuple[RawNet, ...]
    design: Optional[RawDesign] = None
