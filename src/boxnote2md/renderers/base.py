#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/renderers/base.py
"""Base class for document renderers.

Renderers turn a decoded Box Notes tree into an output format. They are
stateless: a renderer instance may be reused for any number of documents and
shared between threads.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from boxnote2md.ast.nodes import Node
from boxnote2md.exceptions import OutputWriteError
from boxnote2md.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for Box Notes renderers.

    Subclasses implement :meth:`render_to_string`; :meth:`render` writes that
    string to a file or stream.

    Examples
    --------
        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Render the document tree to a string.

        Parameters
        ----------
        doc : Node
            Document root (the ``doc`` node)

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document tree and write it to ``output``.

        Parameters
        ----------
        doc : Node
            Document root (the ``doc`` node)
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        content = self.render_to_string(doc)
        try:
            write_content(content, output)
        except OSError as e:
            output_path = str(output) if isinstance(output, (str, Path)) else None
            raise OutputWriteError(f"failed to write: {e}", output_path=output_path, original_error=e) from e
