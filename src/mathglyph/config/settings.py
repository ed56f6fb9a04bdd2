"""Configuration settings for Mathglyph."""

from pathlib import Path

from pydantic import BaseModel, Field

from mathglyph.domain import FontOptions, FontShape, FontWeight, RenderOptions


class FontConfig(BaseModel):
    """A font request in configuration form."""

    family: str = Field(
        default="Main",
        min_length=1,
        description="Font family (Main, Math, AMS, Typewriter, ...)",
    )
    weight: FontWeight = Field(
        default=FontWeight.NORMAL,
        description="Font weight",
    )
    shape: FontShape = Field(
        default=FontShape.UPRIGHT,
        description="Font shape",
    )
    fallback: list["FontConfig"] = Field(
        default_factory=list,
        description="Fonts tried in order when the glyph is missing",
    )

    def to_options(self) -> FontOptions:
        """Convert to domain font options."""
        return FontOptions(
            font_family=self.family,
            font_weight=self.weight,
            font_shape=self.shape,
            fallback=tuple(f.to_options() for f in self.fallback),
        )


FontConfig.model_rebuild()


class AlignmentConfig(BaseModel):
    """Configuration for math-axis alignment."""

    center_operators: bool = Field(
        default=False,
        description="Center short operators, relations and variables on the math axis",
    )
    force_variable_baseline: bool = Field(
        default=False,
        description="Keep ordinary atoms on the baseline (variables next to numerals)",
    )


class RenderConfig(BaseModel):
    """Configuration for the rendering context."""

    font_size: float = Field(
        default=1.0,
        gt=0.0,
        description="Device units per em",
    )
    color: str = Field(
        default="#000000",
        description="Glyph color",
    )
    math_font: FontConfig | None = Field(
        default=None,
        description="Font override for math mode",
    )
    text_font: FontConfig | None = Field(
        default=None,
        description="Font override for text mode",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MathGlyphSettings(BaseModel):
    """Main application settings."""

    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_render_options(self) -> RenderOptions:
        """Build the immutable rendering context for resolution calls."""
        return RenderOptions(
            math_font_options=self.render.math_font.to_options() if self.render.math_font else None,
            text_font_options=self.render.text_font.to_options() if self.render.text_font else None,
            center_operators=self.alignment.center_operators,
            force_variable_baseline=self.alignment.force_variable_baseline,
            color=self.render.color,
            font_size=self.render.font_size,
        )


def get_default_settings() -> MathGlyphSettings:
    """Get default application settings."""
    return MathGlyphSettings()
