"""Matching network adapters to entries of the interface statistics table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from trafficmon.textutil import similarity_degree

UNKNOWN_ADDRESS = "-.-.-.-"


@dataclass
class NetworkConnection:
    """One network connection with its table position, counters and addresses."""

    index: int = 0
    description: str = ""
    description_2: str = ""
    in_bytes: int = 0
    out_bytes: int = 0
    ip_address: str = UNKNOWN_ADDRESS
    subnet_mask: str = UNKNOWN_ADDRESS
    default_gateway: str = UNKNOWN_ADDRESS


@dataclass
class InterfaceEntry:
    """One row of the interface statistics table."""

    description: str
    in_octets: int = 0
    out_octets: int = 0


def _copy_addresses(target: NetworkConnection, source: NetworkConnection) -> None:
    target.ip_address = source.ip_address
    target.subnet_mask = source.subnet_mask
    target.default_gateway = source.default_gateway


def find_connection(description: str, table: Sequence[InterfaceEntry]) -> int:
    """Index of the entry whose description equals ``description``, or -1."""
    return next(
        (index for index, entry in enumerate(table) if entry.description == description),
        -1,
    )


def find_connection_fuzzy(description: str, table: Sequence[InterfaceEntry]) -> int:
    """Index of the entry that best matches ``description``.

    An entry whose description contains, or is contained in, the given one
    wins; otherwise the most similar description is chosen (0 if none is).
    """
    for index, entry in enumerate(table):
        if len(entry.description) >= len(description):
            found = description in entry.description
        else:
            found = entry.description in description
        if found:
            return index
    best_degree = 0.0
    best_index = 0
    for index, entry in enumerate(table):
        degree = similarity_degree(entry.description, description)
        if degree > best_degree:
            best_degree = degree
            best_index = index
    return best_index


def fill_if_table_info(
    adapters: Iterable[NetworkConnection], table: Sequence[InterfaceEntry]
) -> None:
    """Set the table index, byte counters and table description of each adapter."""
    for adapter in adapters:
        if not adapter.description:
            continue
        index = find_connection(adapter.description, table)
        if index == -1:
            index = find_connection_fuzzy(adapter.description, table)
        if not table:
            raise ValueError("interface table is empty")
        entry = table[index]
        adapter.index = index
        adapter.in_bytes = entry.in_octets
        adapter.out_bytes = entry.out_octets
        adapter.description_2 = entry.description


def all_if_table_info(
    adapter_infos: Sequence[NetworkConnection], table: Sequence[InterfaceEntry]
) -> list[NetworkConnection]:
    """One connection per table entry, with addresses taken from matching adapters."""
    connections = []
    for index, entry in enumerate(table):
        connection = NetworkConnection(
            index=index,
            description=entry.description,
            description_2=entry.description,
            in_bytes=entry.in_octets,
            out_bytes=entry.out_octets,
        )
        match = next(
            (info for info in adapter_infos if info.description in connection.description),
            None,
        )
        if match is not None:
            _copy_addresses(connection, match)
        connections.append(connection)
    return connections


def refresh_ip_address(
    adapters: Iterable[NetworkConnection], fresh: Iterable[NetworkConnection]
) -> None:
    """Copy addresses from freshly read adapters onto those with the same description."""
    adapters = list(adapters)
    for new in fresh:
        for adapter in adapters:
            if adapter.description == new.description:
                _copy_addresses(adapter, new)