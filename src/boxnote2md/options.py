#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/boxnote2md/options.py
"""Options for converting ``.boxnote`` files to Markdown files.

Rendering itself has no knobs; these options only control how files are
converted: where the output goes, whether existing files may be replaced and
whether a title heading derived from the file name is added.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from boxnote2md.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Options for file-to-file conversion.

    Parameters
    ----------
    force : bool, default = False
        Overwrite existing output files without asking
    include_title : bool, default = True
        Prefix the output with ``# <file name>`` and a blank line
    output_dir : Path or None, default = None
        Directory for output files; defaults to the input file's directory

    Examples
    --------
        >>> options = ConversionOptions(force=True)
        >>> options.create_updated(include_title=False).include_title
        False

    """

    force: bool = field(
        default=False,
        metadata={"help": "Overwrite output files without prompting"},
    )
    include_title: bool = field(
        default=True,
        metadata={"help": "Add a title heading derived from the input file name"},
    )
    output_dir: Path | None = field(
        default=None,
        metadata={"help": "Directory for output files (default: next to each input file)"},
    )

    def __post_init__(self) -> None:
        """Normalize and validate field values.

        Raises
        ------
        ValidationError
            If ``output_dir`` exists but is not a directory.

        """
        if isinstance(self.output_dir, str):
            object.__setattr__(self, "output_dir", Path(self.output_dir))
        if self.output_dir is not None and self.output_dir.exists() and not self.output_dir.is_dir():
            raise ValidationError(
                f"output_dir must be a directory, got {self.output_dir}",
                parameter_name="output_dir",
                parameter_value=self.output_dir,
            )
