"""Tree and path display for logs."""

import html
from typing import TYPE_CHECKING, Any, Sequence

from povtree.logger.table_logger import TableLogger
from povtree.logger.formatting import format_edges, format_indented, format_path

if TYPE_CHECKING:
    from povtree.tree import Node


class TreeLogger(TableLogger):
    """Extension of TableLogger with tree and path rendering."""

    def log_tree(self, root: "Node", title: str = "Tree", show_edges: bool = False):
        """Log a tree as an S-expression plus an indented view."""
        if self.disabled:
            return

        self.subsection(title)
        self.logger.info(str(root))
        indented = format_indented(root)
        self.logger.debug(indented)
        self._html_content.append(
            '<div class="tree-view">'
            f"<p>{html.escape(str(root))}</p>"
            f"<pre>{html.escape(indented)}</pre>"
            "</div>"
        )
        if show_edges:
            self.result("Edges", format_edges(root.edges()))

    def log_path(self, labels: Sequence[Any], title: str = "Path"):
        """Log a label path inline and as a step table."""
        if self.disabled:
            return

        self.result(title, format_path(labels))
        rows = [[step, label] for step, label in enumerate(labels)]
        self.table(rows, headers=["Step", "Label"], tablefmt="simple")
