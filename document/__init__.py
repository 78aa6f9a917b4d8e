"""Document layer - Notebook JSON model and its on-disk representation."""
from .cell import Cell, CellOutput
from .notebook import Notebook
from .serialization import (
    NotebookFormatError,
    notebook_from_file_contents,
    notebook_json_contents_from_notebook,
    file_contents_from_notebook,
    new_notebook,
    transform_notebook,
    join_lines,
    split_lines,
)

__all__ = [
    'Cell', 'CellOutput',
    'Notebook',
    'NotebookFormatError',
    'notebook_from_file_contents', 'notebook_json_contents_from_notebook',
    'file_contents_from_notebook', 'new_notebook',
    'transform_notebook', 'join_lines', 'split_lines',
]
