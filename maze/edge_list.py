"""
Edge list export - a grid's passages as plain text

Format: a `<vertex_count> <edge_count>` header line, then one
`<source> <target>` line per passage. Vertices are the 1-based row-major
cell indices.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def edge_list_lines(grid):
    """Yield the export's lines, header first, without line endings"""
    yield f"{grid.size} {grid.links_count}"
    for source, target in grid.edge_indices().tolist():
        yield f"{source + 1} {target + 1}"


def edge_list_text(grid):
    return "".join(line + "\n" for line in edge_list_lines(grid))


def write_edge_list(grid, path):
    """
    Write the grid's edge list to a file, creating parent directories.

    Args:
        grid: Grid to export
        path: Output file path

    Returns:
        Path: the file written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        for line in edge_list_lines(grid):
            f.write(line + "\n")
    logger.debug("Wrote %d edges to %s", grid.links_count, path)
    return path
