"""Output format configuration schema."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class OutputConfig(BaseModel):
    """Configuration for the cut-list output.

    Attributes:
        format: Output format; "table" prints the formatted report.
        output_file: Optional path the output is written to.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["table", "json", "csv"] = "table"
    output_file: str | None = None
