"""Shared fixtures for ncsh tests."""
from pathlib import Path

import pytest

import ncsh_lib
from ncsh_lib.repl import create_context
from ncsh_lib.schema import SchemaContext, load_schema, parse_schema_module


SHIPPED_SCHEMA_DIR = Path(ncsh_lib.__file__).resolve().parent / "schema" / "modules"


# Small schema exercising every node kind
MINI_MODULE = {
    "module": "mini",
    "revision": "2024-01-01",
    "namespace": "urn:test:mini",
    "nodes": [
        {
            "name": "system",
            "kind": "container",
            "presence": True,
            "children": [
                {"name": "hostname", "kind": "leaf"},
                {"name": "domain", "kind": "leaf", "default": "local"},
                {"name": "search", "kind": "leaf-list"},
            ],
        },
        {
            "name": "interfaces",
            "kind": "container",
            "children": [
                {
                    "name": "interface",
                    "kind": "list",
                    "keys": ["name"],
                    "children": [
                        {"name": "name", "kind": "leaf"},
                        {"name": "mtu", "kind": "leaf", "default": 1500},
                        {"name": "oper-status", "kind": "leaf", "config": False},
                    ],
                },
            ],
        },
        {
            "name": "peer",
            "kind": "list",
            "keys": ["a", "b"],
            "children": [
                {"name": "x", "kind": "leaf"},
                {"name": "b", "kind": "leaf"},
                {"name": "a", "kind": "leaf"},
            ],
        },
        {"name": "blob", "kind": "anydata"},
    ],
}


@pytest.fixture
def mini_schema():
    return SchemaContext(modules=[parse_schema_module(MINI_MODULE)])


@pytest.fixture
def schema():
    return load_schema(SHIPPED_SCHEMA_DIR)


@pytest.fixture
def state_file(tmp_path):
    return tmp_path / "state.yaml"


@pytest.fixture
def ctx(schema, state_file):
    return create_context(schema, {}, state_file=state_file)
