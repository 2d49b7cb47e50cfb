#!/usr/bin/env python3
"""
Basic usage example showing how a UI drives FolderTree.

This example demonstrates:
- Building the initial tree from a literal
- Creating, renaming and deleting nodes through TreeEngine
- Handling rejected edits
- Printing the folders-first display order
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from foldertree import EngineConfig, IdStrategy, Node, TreeEngine, ValidationError


EXPLORER = {
    "id": 1,
    "name": "root",
    "isFolder": True,
    "items": [
        {
            "id": 2,
            "name": "public",
            "isFolder": True,
            "items": [
                {"id": 3, "name": "index.html", "isFolder": False, "items": []},
            ],
        },
        {"id": 4, "name": "package.json", "isFolder": False, "items": []},
    ],
}


def render(engine: TreeEngine, node: Node, depth: int = 0) -> list:
    """Render the tree the way an explorer sidebar shows it."""
    icon = "[D]" if node.is_folder else "[F]"
    lines = [f"{'    ' * depth}{icon} {node.name}"]
    for child in engine.sorted_children(node):
        lines.extend(render(engine, child, depth + 1))
    return lines


def main():
    """Walk through a short editing session."""
    engine = TreeEngine(EngineConfig(id_strategy=IdStrategy.SEQUENTIAL))
    tree = Node.from_dict(EXPLORER)

    tree, src_id = engine.insert_with_id(tree, 1, "src", is_folder=True)
    tree, app_id = engine.insert_with_id(tree, src_id, "App.js", is_folder=False)
    tree = engine.insert(tree, src_id, "index.js", is_folder=False)

    # The UI shows this message next to the edit box
    try:
        tree = engine.insert(tree, src_id, "app.JS", is_folder=False)
    except ValidationError as e:
        print(f"Rejected: {e}")

    tree = engine.rename(tree, app_id, "Main.js")
    tree = engine.delete(tree, 4)

    print("\n".join(render(engine, tree)))
    return tree


if __name__ == "__main__":
    main()
