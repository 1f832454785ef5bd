from __future__ import annotations

"""
Tree Renderer.

Converts TreeNode hierarchies into their output forms: indented text lines
for pasting into prompts, and a JSON-ready dictionary for machine
consumption. Also parses the dictionary form back into nodes.
"""

from typing import Any, Dict, List

from tree4ai.domain.constants import HEADER_RULES, HEADER_TITLE, INDENT_SPACES
from tree4ai.domain.pipeline_models import PipelineResult
from tree4ai.domain.tree_models import TreeNode

TYPE_DIRECTORY = "directory"
TYPE_FILE = "file"

# -----------------------------------------------------------------------------
# TEXT RENDERING
# -----------------------------------------------------------------------------

def render_text(tree: TreeNode, indent: int = INDENT_SPACES) -> List[str]:
    """
    Render the tree as indented lines.

    The root appears as '<name>/' with no indentation; every deeper level
    adds `indent` spaces. Directories carry a trailing '/'.

    Args:
        tree: Root node.
        indent: Spaces per depth level.

    Returns:
        List[str]: One line per node.
    """
    lines = [f"{tree.name}/"]
    for depth, node in tree.walk():
        suffix = "/" if node.is_dir else ""
        lines.append(f"{' ' * (indent * depth)}{node.name}{suffix}")
    return lines


def render_header(root: str, mode: str) -> List[str]:
    """Build the LLM helper header, ending with a blank separator line."""
    return [
        HEADER_TITLE,
        f"root: {root}",
        f"mode: {mode}",
        "rules:",
        *HEADER_RULES,
        "",
    ]


def render_document(result: PipelineResult, header: bool = True) -> str:
    """Assemble the full text output, newline terminated."""
    lines: List[str] = []
    if header:
        lines.extend(render_header(result.root, result.mode))
    lines.extend(render_text(result.tree))
    return "\n".join(lines) + "\n"

# -----------------------------------------------------------------------------
# STRUCTURED RENDERING
# -----------------------------------------------------------------------------

def tree_to_dict(node: TreeNode) -> Dict[str, Any]:
    """
    Project a node into plain dictionaries, preserving display order.

    Directories carry a 'children' list; files do not.
    """
    if not node.is_dir:
        return {"name": node.name, "type": TYPE_FILE}
    return {
        "name": node.name,
        "type": TYPE_DIRECTORY,
        "children": [tree_to_dict(child) for child in node.children],
    }


def tree_from_dict(data: Any) -> TreeNode:
    """
    Rebuild a node hierarchy from the structure produced by tree_to_dict.

    Raises:
        ValueError: If the payload does not describe a valid node.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a node object, got {type(data).__name__}")

    name = data.get("name")
    node_type = data.get("type")
    if not isinstance(name, str):
        raise ValueError("Node is missing a string 'name'")

    if node_type == TYPE_FILE:
        return TreeNode(name=name, is_dir=False)
    if node_type == TYPE_DIRECTORY:
        children = data.get("children", [])
        if not isinstance(children, list):
            raise ValueError(f"Directory '{name}' has non-list 'children'")
        return TreeNode(
            name=name,
            is_dir=True,
            children=tuple(tree_from_dict(c) for c in children),
        )
    raise ValueError(f"Unknown node type for '{name}': {node_type!r}")


def build_json_payload(result: PipelineResult) -> Dict[str, Any]:
    """Build the top-level JSON document for --json output."""
    return {
        "root": result.root,
        "mode": result.mode,
        "indent": INDENT_SPACES,
        "files_count": result.files_count,
        "truncated": result.truncated,
        "tree": tree_to_dict(result.tree),
    }
