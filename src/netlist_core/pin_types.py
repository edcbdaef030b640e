# src/netlist_core/pin_types.py
from enum import Enum

from .parser.exceptions import UnknownPinTypeError

# Different exporter versions emit prefixed variants of the same concept
# ("no_connect", "passive+no_connect", "free+no_connect", ...).
NO_CONNECT_SUFFIX = "no_connect"


class PinType(Enum):
    """The electrical type of a pin."""
    INPUT = "input"
    OUTPUT = "output"
    BIDIRECTIONAL = "bidirectional"
    TRI_STATE = "tri_state"
    PASSIVE = "passive"
    FREE = "free"
    POWER_IN = "power_in"
    POWER_OUT = "power_out"
    OPEN_COLLECTOR = "open_collector"
    OPEN_EMITTER = "open_emitter"
    UNCONNECTED = "no_connect"

    def __str__(self):
        return self.value

    @classmethod
    def from_netlist(cls, pin_type: str) -> "PinType":
        """Maps a pin-type string from the export onto the closed vocabulary."""
        if pin_type.endswith(NO_CONNECT_SUFFIX):
            return cls.UNCONNECTED
        try:
            return cls(pin_type)
        except ValueError:
            raise UnknownPinTypeError(pin_type) from None
