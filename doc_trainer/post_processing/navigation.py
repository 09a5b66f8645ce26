"""Navigation tree derived from the flat section list."""

from ..processing.models import Section


def build_navigation_tree(sections: list[Section]) -> dict:
    """Create a nested structure from flat sections using their levels.

    A section becomes a child of the closest preceding section with a
    lower level. The section list itself is not changed.

    Args:
        sections: Sections in reading order.

    Returns:
        Root node ``{"level": 0, "children": [...]}``; every node has
        ``id``, ``heading``, ``level`` and ``children``.
    """
    root = {"id": None, "heading": "root", "level": 0, "children": []}
    stack = [root]

    for section in sections:
        node = {
            "id": section.id,
            "heading": section.heading,
            "level": section.level,
            "children": []
        }

        # Pop stack until we find parent
        while len(stack) > 1 and stack[-1]["level"] >= section.level:
            stack.pop()

        stack[-1]["children"].append(node)
        stack.append(node)

    return root


def format_outline(sections: list[Section]) -> list[str]:
    """Render sections as indented outline lines."""
    lines = []
    for section in sections:
        indent = "  " * (section.level - 1)
        suffix = f" [{len(section.images)} images]" if section.images else ""
        lines.append(f"{indent}{section.heading} ({section.id}){suffix}")
    return lines
