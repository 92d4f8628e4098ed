from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")


@dataclass
class ReportSettings:
    """Knobs for how match reports are produced."""

    output_format: str = "text"
    show_causes: bool = True
    flush_partial: bool = False
    encoding: str = "utf-8"

    def validate(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")
