"""Cell and output records over the notebook JSON representation."""
from dataclasses import dataclass, field
from typing import Optional, Any, List, Dict


@dataclass
class CellOutput:
    """
    A single output attached to a cell.

    Only 'data' can hold multi-line content; every other key of the
    output (output_type, metadata, execution_count, ...) is kept in
    `extra` and written back untouched. An explicit `"data": null`
    is kept in `extra` too, so it survives a round trip.
    """
    data: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to the notebook JSON representation."""
        result = dict(self.extra)
        if self.data is not None:
            result['data'] = self.data
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'CellOutput':
        """Create CellOutput from its JSON representation."""
        extra = {k: v for k, v in data.items() if k != 'data' or v is None}
        return cls(data=data.get('data'), extra=extra)


@dataclass
class Cell:
    """
    A single cell in a notebook.

    `source` is a plain string in memory and a list of line fragments
    on disk. `outputs` is None when the cell has no outputs list at all
    (markdown and raw cells).
    """
    cell_type: str = "code"
    source: Optional[Any] = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    outputs: Optional[List[CellOutput]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _KEYS = ('cell_type', 'source', 'metadata', 'outputs')

    def to_dict(self) -> dict:
        """Convert to the notebook JSON representation."""
        result = {'cell_type': self.cell_type}
        if self.source is not None:
            result['source'] = self.source
        result['metadata'] = self.metadata
        if self.outputs is not None:
            result['outputs'] = [o.to_dict() for o in self.outputs]
        result.update(self.extra)
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'Cell':
        """Create Cell from its JSON representation."""
        outputs = data.get('outputs')
        if outputs is not None:
            outputs = [CellOutput.from_dict(o) for o in outputs]

        return cls(
            cell_type=data.get('cell_type', 'code'),
            source=data.get('source'),
            metadata=data.get('metadata', {}),
            outputs=outputs,
            extra={k: v for k, v in data.items()
                   if k not in cls._KEYS or (k == 'source' and v is None)},
        )
