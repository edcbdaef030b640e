# tests/conftest.py
import pytest

from netlist_core import parse

# A small but complete export: a connector feeding a resistor and two buffers
# that share one part. J1 pin 5 and U2 pin 2 are left unconnected.
KVT_NETLIST = """\
(export (version "E")
  (design
    (source "/home/user/kvt/kvt.kicad_sch")
    (date "2023-05-14T10:21:03+0200")
    (tool "Eeschema 7.0.2")
    (sheet (number "1") (name "/") (tstamps "/")
      (title_block
        (title)
        (company)
        (rev)
        (date)
        (source "kvt.kicad_sch")
        (comment (number "1") (value "")))))
  (components
    (comp (ref "J1")
      (value "Conn_01x05")
      (footprint "Connector_PinHeader_2.54mm:PinHeader_1x05_P2.54mm_Vertical")
      (datasheet "~")
      (fields
        (field (name "Footprint") "Connector_PinHeader_2.54mm:PinHeader_1x05_P2.54mm_Vertical")
        (field (name "Datasheet") "~"))
      (libsource (lib "Connector_Generic") (part "Conn_01x05") (description "Generic connector, single row, 01x05"))
      (property (name "Sheetname") (value ""))
      (property (name "Sheetfile") (value "kvt.kicad_sch"))
      (sheetpath (names "/") (tstamps "/"))
      (tstamps "3b1f5c2e-0c55-4b8c-9f2d-0d1e5b6a7c01"))
    (comp (ref "R1")
      (value "10k")
      (footprint "Resistor_SMD:R_0603_1608Metric")
      (libsource (lib "Device") (part "R") (description "Resistor"))
      (property (name "Sheetname") (value ""))
      (property (name "Sheetfile") (value "kvt.kicad_sch"))
      (sheetpath (names "/") (tstamps "/"))
      (tstamps "3b1f5c2e-0c55-4b8c-9f2d-0d1e5b6a7c02"))
    (comp (ref "U1")
      (value "Buffer")
      (libsource (lib "MyLib") (part "Buffer") (description "Single buffer"))
      (property (name "Sheetname") (value ""))
      (sheetpath (names "/") (tstamps "/"))
      (tstamps "3b1f5c2e-0c55-4b8c-9f2d-0d1e5b6a7c03"))
    (comp (ref "U2")
      (value "Buffer")
      (libsource (lib "MyLib") (part "Buffer") (description "Single buffer"))
      (property (name "Sheetname") (value ""))
      (sheetpath (names "/") (tstamps "/"))
      (tstamps "3b1f5c2e-0c55-4b8c-9f2d-0d1e5b6a7c04")))
  (libparts
    (libpart (lib "Connector_Generic") (part "Conn_01x05")
      (description "Generic connector, single row, 01x05")
      (docs "~")
      (footprints
        (fp "Connector*:*_1x??_*"))
      (fields
        (field (name "Reference") "J")
        (field (name "Value") "Conn_01x05"))
      (pins
        (pin (num "1") (name "Pin_1") (type "passive"))
        (pin (num "2") (name "Pin_2") (type "passive"))
        (pin (num "3") (name "Pin_3") (type "passive"))
        (pin (num "4") (name "Pin_4") (type "passive"))
        (pin (num "5") (name "Pin_5") (type "passive"))))
    (libpart (lib "Device") (part "R")
      (description "Resistor")
      (docs "~")
      (footprints
        (fp "R_*"))
      (fields
        (field (name "Reference") "R")
        (field (name "Value") "R"))
      (pins
        (pin (num "1") (name "~") (type "passive"))
        (pin (num "2") (name "~") (type "passive"))))
    (libpart (lib "MyLib") (part "Buffer")
      (description "Single buffer")
      (pins
        (pin (num "1") (name "A") (type "input"))
        (pin (num "2") (name "Y") (type "output"))
        (pin (num "3") (name "VCC") (type "power_in"))
        (pin (num "4") (name "GND") (type "power_in")))))
  (libraries
    (library (logical "Connector_Generic")
      (uri "/usr/share/kicad/symbols//Connector_Generic.kicad_sym"))
    (library (logical "Device")
      (uri "/usr/share/kicad/symbols//Device.kicad_sym")))
  (nets
    (net (code "1") (name "+5V") (class "Default")
      (node (ref "J1") (pin "1") (pinfunction "Pin_1") (pintype "passive"))
      (node (ref "U1") (pin "3") (pinfunction "VCC") (pintype "power_in"))
      (node (ref "U2") (pin "3") (pinfunction "VCC") (pintype "power_in")))
    (net (code "2") (name "/IN") (class "Default")
      (node (ref "J1") (pin "2") (pinfunction "Pin_2") (pintype "passive"))
      (node (ref "R1") (pin "1") (pintype "passive")))
    (net (code "3") (name "/OUT") (class "Default")
      (node (ref "J1") (pin "3") (pinfunction "Pin_3") (pintype "passive"))
      (node (ref "U1") (pin "2") (pinfunction "Y") (pintype "output")))
    (net (code "4") (name "GND") (class "Default")
      (node (ref "J1") (pin "4") (pinfunction "Pin_4") (pintype "passive"))
      (node (ref "U1") (pin "4") (pinfunction "GND") (pintype "power_in"))
      (node (ref "U2") (pin "4") (pinfunction "GND") (pintype "power_in")))
    (net (code "5") (name "Net-(R1-Pad2)") (class "Default")
      (node (ref "R1") (pin "2") (pintype "passive"))
      (node (ref "U1") (pin "1") (pinfunction "A") (pintype "input"))
      (node (ref "U2") (pin "1") (pinfunction "A") (pintype "input")))
    (net (code "6") (name "unconnected-(U2-Y-Pad2)") (class "Default")
      (node (ref "U2") (pin "2") (pinfunction "Y") (pintype "output+no_connect")))
    (net (code "7") (name "unconnected-(J1-Pin_5-Pad5)") (class "Default")
      (node (ref "J1") (pin "5") (pinfunction "Pin_5") (pintype "passive+no_connect")))))
"""

# Two buffers sharing one part, five nets. The minimal export that exercises
# part sharing and net pruning.
BUFFERS_NETLIST = """\
(export (version E)
  (components
    (comp (ref U1) (value Buf) (libsource (lib L) (part Buf)))
    (comp (ref U2) (value Buf) (libsource (lib L) (part Buf))))
  (libparts
    (libpart (lib L) (part Buf) (description "buffer")
      (pins
        (pin (num 1) (name A) (type input))
        (pin (num 2) (name Y) (type output)))))
  (nets
    (net (code 1) (name a1) (node (ref U1) (pin 1) (pintype input)))
    (net (code 2) (name y1) (node (ref U1) (pin 2) (pintype output)))
    (net (code 3) (name a2) (node (ref U2) (pin 1) (pintype input)))
    (net (code 4) (name y2) (node (ref U2) (pin 2) (pintype output)))
    (net (code 5) (name spare) (node (ref U2) (pin 2) (pintype output)))))
"""


def make_export(components="", libparts="", nets="", version='"E"', root="export"):
    """Assembles a minimal export from section bodies."""
    return (
        f"({root} (version {version})\n"
        f"  (components {components})\n"
        f"  (libparts {libparts})\n"
        f"  (nets {nets}))\n"
    )


@pytest.fixture
def kvt_source():
    return KVT_NETLIST


@pytest.fixture
def kvt_netlist():
    return parse(KVT_NETLIST)


@pytest.fixture
def buffers_netlist():
    return parse(BUFFERS_NETLIST)


@pytest.fixture
def buffers_source():
    return BUFFERS_NETLIST


@pytest.fixture
def export_builder():
    return make_export
