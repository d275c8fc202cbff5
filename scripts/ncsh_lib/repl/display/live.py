"""
Operational state display functions for ncsh.

These functions turn an operational state snapshot into OSPFv2 tables
and detail listings. They only read the snapshot through the tree
accessors (find_path, child_value).
"""

from typing import Optional

from rich.table import Table

from ncsh_lib.schema import DataNode, DataTree, NodeKind

from .pager import new_table


OSPF_INSTANCE_PATH = "/routing/control-plane-protocols/control-plane-protocol[type='ospfv2']"
OSPF_AREA_PATH = "ospf/areas/area"
OSPF_RIB_PATH = "ospf/local-rib/route"

# Containers expanded one level deep in detail listings
DETAIL_CONTAINERS = ("statistics", "graceful-restart")


def _interface_path(name: Optional[str]) -> str:
    path = "interfaces/interface"
    if name:
        path = f"{path}[name='{name}']"
    return path


def _neighbor_path(router_id: Optional[str]) -> str:
    path = "neighbors/neighbor"
    if router_id:
        path = f"{path}[neighbor-router-id='{router_id}']"
    return path


def _hello_column(iface: DataNode) -> str:
    timer = iface.child_opt_value("hello-timer")
    status = f"due in {timer}" if timer is not None else "inactive"
    return f"{iface.child_value('hello-interval')} ({status})"


def _detail_lines(dnode: DataNode) -> list[str]:
    """Non-key values of a node, with statistics-like containers expanded."""
    lines = []
    for child in dnode.children():
        if child.kind == NodeKind.LIST_KEY_LEAF:
            continue
        if child.value is not None:
            lines.append(f" {child.name}: {child.value}")
        elif child.name in DETAIL_CONTAINERS:
            values = [c for c in child.children() if c.value is not None]
            if values:
                lines.append(f" {child.name}")
                lines.extend(f"  {c.name}: {c.value}" for c in values)
    return lines


def ospf_interface_table(state: DataTree, name: Optional[str] = None) -> Table:
    """One row per OSPF interface, across every instance and area."""
    table = new_table(
        "Instance", "Area", "Name", "Type", "State", "Priority", "Cost", "Hello Interval (s)",
    )

    for instance in state.find_path(OSPF_INSTANCE_PATH):
        instance_name = instance.child_value("name")
        for area in instance.find_path(OSPF_AREA_PATH):
            area_id = area.child_value("area-id")
            for iface in area.find_path(_interface_path(name)):
                table.add_row(
                    instance_name,
                    area_id,
                    iface.child_value("name"),
                    iface.child_value("interface-type"),
                    iface.child_value("state"),
                    iface.child_value("priority"),
                    iface.child_value("cost"),
                    _hello_column(iface),
                )

    return table


def ospf_interface_detail(state: DataTree, name: Optional[str] = None) -> str:
    """Every value of each OSPF interface, one block per interface."""
    lines = []
    for instance in state.find_path(OSPF_INSTANCE_PATH):
        instance_name = instance.child_value("name")
        for area in instance.find_path(OSPF_AREA_PATH):
            area_id = area.child_value("area-id")
            for iface in area.find_path(_interface_path(name)):
                lines.append(iface.child_value("name"))
                lines.append(f" instance: {instance_name}")
                lines.append(f" area: {area_id}")
                lines.extend(_detail_lines(iface))
                lines.append("")
    return "\n".join(lines)


def ospf_neighbor_table(state: DataTree, router_id: Optional[str] = None) -> Table:
    """One row per OSPF neighbor, across every instance, area and interface."""
    table = new_table(
        "Instance", "Area", "Interface", "Router ID", "Address", "State", "Dead Interval (s)",
    )

    for instance in state.find_path(OSPF_INSTANCE_PATH):
        instance_name = instance.child_value("name")
        for area in instance.find_path(OSPF_AREA_PATH):
            area_id = area.child_value("area-id")
            for iface in area.find_path(_interface_path(None)):
                ifname = iface.child_value("name")
                dead_interval = iface.child_value("dead-interval")
                for nbr in iface.find_path(_neighbor_path(router_id)):
                    table.add_row(
                        instance_name,
                        area_id,
                        ifname,
                        nbr.child_value("neighbor-router-id"),
                        nbr.child_value("address"),
                        nbr.child_value("state"),
                        f"{dead_interval} (due in {nbr.child_value('dead-timer')})",
                    )

    return table


def ospf_neighbor_detail(state: DataTree, router_id: Optional[str] = None) -> str:
    """Every value of each OSPF neighbor, one block per neighbor."""
    lines = []
    for instance in state.find_path(OSPF_INSTANCE_PATH):
        instance_name = instance.child_value("name")
        for area in instance.find_path(OSPF_AREA_PATH):
            area_id = area.child_value("area-id")
            for iface in area.find_path(_interface_path(None)):
                ifname = iface.child_value("name")
                for nbr in iface.find_path(_neighbor_path(router_id)):
                    lines.append(nbr.child_value("neighbor-router-id"))
                    lines.append(f" instance: {instance_name}")
                    lines.append(f" area: {area_id}")
                    lines.append(f" interface: {ifname}")
                    lines.extend(_detail_lines(nbr))
                    lines.append("")
    return "\n".join(lines)


def ospf_route_table(state: DataTree, prefix: Optional[str] = None) -> Table:
    """One row per next-hop; route columns are only filled on the first one."""
    table = new_table(
        "Instance", "Prefix", "Metric", "Type", "Tag", "Nexthop Interface", "Nexthop Address",
    )

    rib_path = OSPF_RIB_PATH
    if prefix:
        rib_path = f"{rib_path}[prefix='{prefix}']"

    for instance in state.find_path(OSPF_INSTANCE_PATH):
        instance_name = instance.child_value("name")
        for route in instance.find_path(rib_path):
            columns = [
                route.child_value("prefix"),
                route.child_value("metric"),
                route.child_value("route-type"),
                route.child_value("route-tag"),
            ]
            for nexthop in route.find_path("next-hops/next-hop"):
                table.add_row(
                    instance_name,
                    *columns,
                    nexthop.child_value("outgoing-interface"),
                    nexthop.child_value("next-hop"),
                )
                columns = ["", "", "", ""]

    return table
