"""Tests for the Node value type and invariant checking."""

import dataclasses

import pytest

from foldertree import Node, NamingConfig, check_invariants


EXPLORER_DATA = {
    "id": "1",
    "name": "root",
    "isFolder": True,
    "items": [
        {
            "id": "2",
            "name": "public",
            "isFolder": True,
            "items": [
                {"id": "3", "name": "index.html", "isFolder": False, "items": []},
            ],
        },
        {"id": "4", "name": "package.json", "isFolder": False, "items": []},
    ],
}


class TestNodeConstruction:
    """Building nodes directly and from literals."""

    def test_folder_and_file_helpers(self):
        folder = Node.folder(1, "docs", [Node.file(2, "a.txt")])
        assert folder.is_folder
        assert folder.items[0].name == "a.txt"
        assert not Node.file(3, "b.txt").is_folder
        assert Node.file(3, "b.txt").items == ()

    def test_items_are_stored_as_tuple(self):
        folder = Node(1, "docs", True, [Node.file(2, "a.txt")])
        assert isinstance(folder.items, tuple)

    def test_file_with_children_rejected(self):
        with pytest.raises(ValueError):
            Node(1, "a.txt", False, (Node.file(2, "b.txt"),))

    def test_nodes_are_immutable(self):
        node = Node.file(1, "a.txt")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "b.txt"

    def test_from_dict(self):
        tree = Node.from_dict(EXPLORER_DATA)
        assert tree.id == "1"
        assert tree.child_names() == ["public", "package.json"]
        assert tree.items[0].items[0].name == "index.html"
        assert not tree.items[1].is_folder

    def test_from_dict_snake_case(self):
        tree = Node.from_dict({"id": 1, "name": "root", "is_folder": True})
        assert tree.is_folder
        assert tree.items == ()

    def test_to_dict_matches_literal(self):
        assert Node.from_dict(EXPLORER_DATA).to_dict() == EXPLORER_DATA

    def test_replace(self):
        node = Node.file(1, "a.txt")
        renamed = node.replace(name="b.txt")
        assert renamed.name == "b.txt"
        assert renamed.id == 1
        assert node.name == "a.txt"

    def test_equality_is_structural(self):
        assert Node.from_dict(EXPLORER_DATA) == Node.from_dict(EXPLORER_DATA)
        assert Node.file(1, "a") != Node.file(1, "b")

    def test_repr_is_short(self):
        tree = Node.from_dict(EXPLORER_DATA)
        assert repr(tree) == "Node(id='1', name='root', folder, 2 items)"
        assert repr(Node.file(9, "x")) == "Node(id=9, name='x', file)"


class TestFindChild:

    def test_find_child_ignores_case_and_whitespace(self):
        tree = Node.from_dict(EXPLORER_DATA)
        assert tree.find_child("  PUBLIC ").id == "2"
        assert tree.find_child("missing") is None

    def test_find_child_case_sensitive(self):
        tree = Node.from_dict(EXPLORER_DATA)
        assert tree.find_child("PUBLIC", NamingConfig(case_sensitive=True)) is None


class TestCheckInvariants:
    """check_invariants reports problems instead of raising."""

    def test_valid_tree(self):
        assert check_invariants(Node.from_dict(EXPLORER_DATA)) == []

    def test_duplicate_ids(self):
        tree = Node.folder(1, "root", [Node.file(2, "a"), Node.folder(3, "b", [Node.file(2, "c")])])
        errors = check_invariants(tree)
        assert len(errors) == 1
        assert "Duplicate id 2" in errors[0]

    def test_duplicate_sibling_names(self):
        tree = Node.folder(1, "root", [Node.file(2, "Readme"), Node.file(3, " readme ")])
        errors = check_invariants(tree)
        assert len(errors) == 1
        assert "share the name" in errors[0]

    def test_duplicate_names_allowed_when_case_sensitive(self):
        tree = Node.folder(1, "root", [Node.file(2, "Readme"), Node.file(3, "readme")])
        assert check_invariants(tree, NamingConfig(case_sensitive=True)) == []

    def test_same_name_in_different_folders_is_fine(self):
        tree = Node.folder(1, "root", [
            Node.folder(2, "a", [Node.file(3, "x")]),
            Node.folder(4, "b", [Node.file(5, "x")]),
        ])
        assert check_invariants(tree) == []

    def test_empty_name(self):
        tree = Node.folder(1, "root", [Node.file(2, "   ")])
        assert check_invariants(tree) == ["Node 2 has an empty name"]
