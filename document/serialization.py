"""
Notebook serialization to/from the on-disk JSON representation.

These functions replicate what a notebook server would normally do:
creating new notebooks, and converting between the in-memory form
(multi-line fields as plain strings) and the on-disk form (multi-line
fields as lists of line fragments, one fragment per line).

Only two fields can be multi-line: a cell's 'source' and an output's
'data'. Everything else in the tree is left alone.
"""
import copy
import json
import logging
from typing import Any, Callable, Dict, Optional

from services.notebook_config import NotebookConfig

logger = logging.getLogger(__name__)

NotebookDict = Dict[str, Any]
TransformFn = Callable[[Any], Any]

NEWLINE = "\n"
NBFORMAT = 4
NBFORMAT_MINOR = 0


class NotebookFormatError(TypeError):
    """A notebook was passed in a shape the caller should never hand us."""


def _is_present(container: dict, key: str) -> bool:
    return key in container and container[key] is not None


def transform_notebook(notebook: NotebookDict, transform_fn: TransformFn) -> Optional[bool]:
    """
    Apply `transform_fn` to every multi-line capable field, in place.

    Cells are visited in order; within a cell the 'source' comes first,
    then the 'data' of each output. Absent fields are skipped.

    Returns True once the walk is done, or None (nothing touched) when
    the notebook has no 'cells' at all.
    """
    if not _is_present(notebook, 'cells'):
        return None

    for cell in notebook['cells']:
        if _is_present(cell, 'source'):
            cell['source'] = transform_fn(cell['source'])
        if _is_present(cell, 'outputs'):
            for output in cell['outputs']:
                if _is_present(output, 'data'):
                    output['data'] = transform_fn(output['data'])
    return True


def join_lines(multiline: Any) -> Any:
    """Join a list of line fragments back into one string."""
    if isinstance(multiline, list):
        return ''.join(multiline)
    return multiline


def split_lines(multiline: Any) -> Any:
    """
    Split a string into line fragments, keeping the newline on every
    fragment but the last.

    Non-strings (including already split lists) are returned as is, so
    splitting twice is harmless.
    """
    if not isinstance(multiline, str):
        return multiline
    lines = multiline.split(NEWLINE)
    return [line + NEWLINE for line in lines[:-1]] + [lines[-1]]


def notebook_from_file_contents(
    contents: str,
    log: Optional[Any] = None,
    repair_double_encoding: bool = True,
) -> NotebookDict:
    """
    Create an in-memory notebook from the contents of a file.

    Some producers serialize the notebook twice, so that the first parse
    gives back a string; in that case we parse once more (only once).
    Pass repair_double_encoding=False to reject such contents instead.
    Malformed JSON raises json.JSONDecodeError.
    """
    if log is None:
        log = logger

    notebook = json.loads(contents)
    if isinstance(notebook, str):
        if not repair_double_encoding:
            raise NotebookFormatError(
                "Notebook contents decode to a string (serialized twice?) "
                "and double-encoding repair is disabled"
            )
        log.warning("Notebook has apparently been serialized twice, deserializing a second time")
        notebook = json.loads(notebook)
        log.warning("Second deserialization went ok")

    if not isinstance(notebook, dict):
        raise NotebookFormatError(
            f"Notebook contents must decode to a JSON object, got {type(notebook).__name__}"
        )

    transform_notebook(notebook, join_lines)
    if notebook.get('metadata') is None:
        notebook['metadata'] = {}
    return notebook


def notebook_json_contents_from_notebook(
    notebook: NotebookDict,
    log: Optional[Any] = None,
) -> NotebookDict:
    """
    Build the on-disk JSON structure (lines split) for `notebook`.

    Works on a deep copy: the caller's notebook keeps its plain strings.
    """
    if log is None:
        log = logger

    if isinstance(notebook, str):
        error = NotebookFormatError(
            "notebook_json_contents_from_notebook() got a string; "
            "pass the notebook object, not its serialized contents"
        )
        log.error(str(error))
        raise error

    notebook_copy = copy.deepcopy(notebook)
    transform_notebook(notebook_copy, split_lines)
    return notebook_copy


def file_contents_from_notebook(
    notebook: NotebookDict,
    log: Optional[Any] = None,
    config: Optional[NotebookConfig] = None,
) -> str:
    """
    Create the contents of a file (JSON text, lines split) from a notebook.

    Formatting comes from `config`; without one, compact JSON is written.
    """
    if config is None:
        config = NotebookConfig()
    contents = notebook_json_contents_from_notebook(notebook, log=log)
    return json.dumps(contents, **config.json_dump_kwargs())


def new_notebook() -> NotebookDict:
    """Create the in-memory representation of a new, empty notebook."""
    return {
        'cells': [{
            'cell_type': 'code',
            'source': '',
            'outputs': [],
            'language': 'python',
            'metadata': {},
        }],
        'metadata': {},
        'nbformat': NBFORMAT,
        'nbformat_minor': NBFORMAT_MINOR,
    }
