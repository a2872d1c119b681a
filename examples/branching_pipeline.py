#!/usr/bin/env python3
"""
Build a small branching arrow pipeline, run it both ways, and show its shape.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.tree import Tree

from arrowpipe import Arrow, configure, pipe

console = Console()


def add_one(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def subtract_one(x: int) -> int:
    return x - 1


def to_rich_tree(arrow: Arrow, tree: Optional[Tree] = None) -> Tree:
    """Mirror an arrow's attached structure as a rich Tree."""
    node = Tree(f"[bold]{arrow.name}[/bold]") if tree is None else tree
    for index, child in enumerate(arrow):
        to_rich_tree(child, node.add(f"[cyan][{index}][/cyan] {child.name}"))
    return node


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    configure(trace=True)

    # Linear chain: (1 + 1) * 2 - 1
    linear = pipe(add_one, double, subtract_one, name="linear")
    console.print(f"linear.execute(1) = {linear.execute(1)}")
    console.print(f"linear.execute_reverse(1) = {linear.execute_reverse(1)}")

    # Nested: an arrow with its own attachments runs as one step of another
    inner = Arrow(add_one, name="inner")
    inner.attach(Arrow(double))
    outer = Arrow(add_one, name="outer")
    outer.attach(inner)
    console.print(f"outer.execute(1) = {outer.execute(1)}")

    console.print(to_rich_tree(outer))


if __name__ == "__main__":
    main()
