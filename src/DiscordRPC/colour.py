# colour.py

from pydantic import BaseModel, Field


class ColourRGB(BaseModel):
    """A 24-bit RGB colour, as used for role colours and embed side bars."""

    value: int = Field(ge=0, le=0xFFFFFF)

    model_config = dict(frozen=True, extra="forbid")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "ColourRGB":
        for part in (red, green, blue):
            if not 0 <= part <= 0xFF:
                raise ValueError(f"colour component out of range: {part}")
        return cls(value=(red << 16) | (green << 8) | blue)

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def hex(self) -> str:
        # Six lowercase digits, no leading '#'
        return f"{self.value:06x}"
