"""Generation profiles - reusable generation settings.

A profile records the choices otherwise made per invocation: the root
type name, the output format, an optional input format override and the
analysis options for the advanced formats.
"""

from pydantic import BaseModel, Field

from json_typegen.analysis.base import AnalysisOptions
from json_typegen.emitters.base import OutputFormat
from json_typegen.inputs.base import InputFormat


class GenerationProfile(BaseModel):
    """Saved settings for a generation run.

    A profile contains no sample data; the input is always supplied
    separately.
    """

    name: str = Field(default="Root", description="Root type or schema name")
    description: str = Field(default="", description="Profile description")

    output_format: OutputFormat = Field(
        default=OutputFormat.INTERFACE,
        description="Target representation"
    )

    input_format: InputFormat | None = Field(
        default=None,
        description="Input format override (detected when omitted)"
    )

    options: AnalysisOptions = Field(
        default_factory=AnalysisOptions.smart_defaults,
        description="Analysis options for the advanced formats"
    )
