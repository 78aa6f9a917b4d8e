"""Notebook record over the notebook JSON representation."""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from services.notebook_config import NotebookConfig

from .cell import Cell
from .serialization import (
    NBFORMAT, NBFORMAT_MINOR,
    new_notebook, notebook_from_file_contents, file_contents_from_notebook,
)


@dataclass
class Notebook:
    """
    A notebook document: ordered cells, metadata and format version.

    `cells` is None for a notebook-shaped object without a cells list;
    such a notebook is carried through unchanged by the serialization
    functions.
    """
    cells: Optional[List[Cell]] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    nbformat: int = NBFORMAT
    nbformat_minor: int = NBFORMAT_MINOR
    extra: Dict[str, Any] = field(default_factory=dict)

    _KEYS = ('cells', 'metadata', 'nbformat', 'nbformat_minor')

    def code_cells(self) -> List[Cell]:
        """Get all code cells."""
        return [c for c in self.cells or [] if c.cell_type == 'code']

    def to_dict(self) -> dict:
        """Convert to the notebook JSON representation."""
        result = {}
        if self.cells is not None:
            result['cells'] = [c.to_dict() for c in self.cells]
        result['metadata'] = self.metadata
        result['nbformat'] = self.nbformat
        result['nbformat_minor'] = self.nbformat_minor
        result.update(self.extra)
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'Notebook':
        """Create Notebook from its JSON representation."""
        cells = data.get('cells')
        if cells is not None:
            cells = [Cell.from_dict(c) for c in cells]

        return cls(
            cells=cells,
            metadata=data.get('metadata') or {},
            nbformat=data.get('nbformat', NBFORMAT),
            nbformat_minor=data.get('nbformat_minor', NBFORMAT_MINOR),
            extra={k: v for k, v in data.items() if k not in cls._KEYS},
        )

    @classmethod
    def new(cls) -> 'Notebook':
        """A new notebook with a single empty code cell."""
        return cls.from_dict(new_notebook())

    @classmethod
    def from_file_contents(cls, contents: str, log: Optional[Any] = None,
                           repair_double_encoding: bool = True) -> 'Notebook':
        """Load a notebook from file contents (multi-line fields joined)."""
        return cls.from_dict(notebook_from_file_contents(
            contents, log=log, repair_double_encoding=repair_double_encoding))

    def to_file_contents(self, log: Optional[Any] = None,
                         config: Optional[NotebookConfig] = None) -> str:
        """Serialize to file contents (multi-line fields split)."""
        return file_contents_from_notebook(self.to_dict(), log=log, config=config)
