# tests/test_mutation.py

import copy
import logging

from netlist_core import PartId, parse

BUF = PartId("MyLib", "Buffer")
RESISTOR = PartId("Device", "R")


def test_remove_component_works(kvt_netlist):
    kvt_netlist.remove_component("R1")
    assert len(kvt_netlist.components) == 3
    assert len(kvt_netlist.parts) == 2
    assert len(kvt_netlist.nets) == 7
    assert kvt_netlist.get_part(RESISTOR) is None

    kvt_netlist.remove_component("U2")
    assert len(kvt_netlist.components) == 2
    assert len(kvt_netlist.parts) == 2
    assert len(kvt_netlist.nets) == 6
    assert kvt_netlist.get_part(BUF).components == frozenset({"U1"})


def test_remove_components_works(kvt_netlist):
    kvt_netlist.remove_components(["R1", "U2"])
    assert len(kvt_netlist.components) == 2
    assert len(kvt_netlist.parts) == 2
    assert len(kvt_netlist.nets) == 6


def test_batch_matches_sequential_removal(kvt_source):
    sequential = parse(kvt_source)
    sequential.remove_component("R1")
    sequential.remove_component("U2")

    batch = parse(kvt_source)
    batch.remove_components(["R1", "U2"])
    assert batch == sequential


def test_nets_keep_surviving_nodes(kvt_netlist):
    kvt_netlist.remove_component("R1")
    shared = kvt_netlist.get_net("Net-(R1-Pad2)")
    assert [(n.ref_des, n.pin_num) for n in shared.nodes] == [("U1", "1"), ("U2", "1")]
    net_in = kvt_netlist.get_net("/IN")
    assert [n.ref_des for n in net_in.nodes] == ["J1"]


def test_net_with_no_surviving_node_is_pruned(kvt_netlist):
    kvt_netlist.remove_component("J1")
    assert kvt_netlist.get_net("unconnected-(J1-Pin_5-Pad5)") is None
    assert kvt_netlist.get_net("/IN") is not None
    assert all(n.nodes for n in kvt_netlist.nets)


def test_removing_one_of_a_shared_part_keeps_the_part(buffers_netlist):
    buffers_netlist.remove_component("U1")
    assert [c.ref_des for c in buffers_netlist.components] == ["U2"]
    assert len(buffers_netlist.parts) == 1
    assert buffers_netlist.parts[0].components == frozenset({"U2"})
    assert [n.name for n in buffers_netlist.nets] == ["a2", "y2", "spare"]


def test_batch_with_every_user_of_a_part_removes_it_once(buffers_netlist):
    buffers_netlist.remove_components(["U1", "U2"])
    assert buffers_netlist.components == []
    assert buffers_netlist.parts == []
    assert buffers_netlist.nets == []


def test_duplicates_in_batch_are_harmless(kvt_source):
    once = parse(kvt_source)
    once.remove_components(["U1", "U2"])
    twice = parse(kvt_source)
    twice.remove_components(["U1", "U2", "U1"])
    assert once == twice
    assert once.get_part(BUF) is None


def test_remove_nonexistent_is_a_no_op(kvt_netlist):
    before = copy.deepcopy(kvt_netlist)
    kvt_netlist.remove_component("X99")
    kvt_netlist.remove_components(["X99", "Y1"])
    assert kvt_netlist == before


def test_removing_the_empty_set_keeps_the_model(kvt_source):
    netlist = parse(kvt_source)
    netlist.remove_components([])
    assert netlist == parse(kvt_source)


def test_batch_accepts_any_iterable(kvt_netlist):
    kvt_netlist.remove_components(r for r in ("R1",))
    assert kvt_netlist.get_component("R1") is None


def test_invariants_hold_after_every_removal(kvt_netlist):
    for ref_des in ["U2", "J1", "R1", "U1"]:
        kvt_netlist.remove_component(ref_des)
        part_ids = {p.part_id for p in kvt_netlist.parts}
        for component in kvt_netlist.components:
            assert component.part_id in part_ids
            for pin in component.pins:
                assert kvt_netlist.net_for_pin(component.ref_des, pin.num) is not None
        assert all(p.components for p in kvt_netlist.parts)
        assert all(n.nodes for n in kvt_netlist.nets)
    assert (kvt_netlist.components, kvt_netlist.parts, kvt_netlist.nets) == ([], [], [])


def test_removal_is_logged_at_debug(kvt_netlist, caplog):
    with caplog.at_level(logging.DEBUG, logger="netlist_core.data_structures"):
        kvt_netlist.remove_component("R1")
    assert "['R1']" in caplog.text
    assert "Device:R" in caplog.text


def test_single_string_is_one_ref_des(export_builder):
    netlist = parse(export_builder(
        components="(comp (ref R) (value 1k) (libsource (lib Device) (part R))) "
                   "(comp (ref R1) (value 2k) (libsource (lib Device) (part R)))",
        libparts="(libpart (lib Device) (part R) (description Resistor))",
    ))
    netlist.remove_components("R1")
    assert [c.ref_des for c in netlist.components] == ["R"]
    assert netlist.get_part(RESISTOR).components == frozenset({"R"})
