# src/netlist_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("netlist-core package initialized.")

from .pin_types import PinType
from .parser.raw_data import PartId
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
from .config import ConfigError, NetlistConfig, load_config
from .netlist_builder import NetlistResolver, parse
from .analysis import build_connectivity_graph, connected_groups, nets_between
from .errors import (
    DiagnosableError,
    MissingNetError,
    MissingPartError,
    NetlistLinkageError,
    NetlistParseError,
    SourceDecodeError,
    UnusedPartError,
)

__all__ = [
    # Entry point
    "parse", "NetlistResolver",
    # Data Structures
    "NetList", "Component", "ComponentPin", "Part", "PartPin", "Net", "Node",
    "DesignInfo", "PartId", "PinType",
    # Configuration
    "NetlistConfig", "load_config", "ConfigError",
    # Analysis
    "build_connectivity_graph", "connected_groups", "nets_between",
    # Errors (Actionable Diagnostics)
    "DiagnosableError", "NetlistParseError", "NetlistLinkageError",
    "MissingPartError", "MissingNetError", "UnusedPartError", "SourceDecodeError",
]
