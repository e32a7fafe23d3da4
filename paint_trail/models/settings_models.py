"""Parameter models for paint trail configuration.

This module defines Pydantic models that encapsulate all configurable
parameters for each stage of the paint trail: stroke generation (fan and
wave variants), width animation, outline rendering and the render loop
itself. These models provide validation, default values, and clear
interfaces for customizing the behavior of each step.
"""

from enum import Enum

from pydantic import BaseModel, Field


class StrokeVariant(str, Enum):
    """Which stroke path generator a session uses."""

    FAN = "fan"
    WAVE = "wave"


class ColorPolicy(str, Enum):
    """How a stroke's color is chosen from the palette."""

    RANDOM = "random"
    CYCLE = "cycle"


DEFAULT_PALETTE = [
    "hsl(331, 70%, 65%)",
    "hsl(32, 80%, 58%)",
    "hsl(145, 60%, 58%)",
    "hsl(202, 67%, 60%)",
    "hsl(258, 53%, 55%)",
]


class FanParams(BaseModel):
    """Configuration for the fan/curl stroke generator.

    The stroke fans out from the newest pointer position back toward the
    oldest one, curling by a random amount drawn once per stroke.

    Attributes:
        steps: Number of sample points per stroke (default 10).
        curve: Maximum total curl in degrees, either direction (default 20).
        bulge: Peak width as a fraction of the stroke length (default 0.01).
        min_length_rate: Lower bound of the random length multiplier (default 0.5).
        max_length_rate: Upper bound of the random length multiplier (default 2.0).
    """

    steps: int = Field(10, ge=2, le=500, description="Sample points per stroke")
    curve: float = Field(20.0, ge=0.0, le=360.0, description="Maximum curl in degrees")
    bulge: float = Field(0.01, ge=0.0, description="Peak width per unit length")
    min_length_rate: float = Field(
        0.5, gt=0.0, description="Lower bound of the length multiplier"
    )
    max_length_rate: float = Field(
        2.0, gt=0.0, description="Upper bound of the length multiplier"
    )


class WaveParams(BaseModel):
    """Configuration for the wave stroke generator.

    Samples are laid out at fixed spacing along the gesture and displaced
    sideways by a sine wave whose phase is drawn once per stroke. Every
    ``wisp_every``-th sample receives a random jitter; the rest are
    interpolated between those.

    Attributes:
        size: Spacing between samples in canvas units (default 10).
        amplitude: Maximum sideways displacement (default 5).
        frequency: Wave cycles per canvas unit (default 0.01).
        wisp_every: Jitter every Nth sample, 0 disables jitter (default 3).
        wisp_amount: Maximum jitter per axis (default 2).
        peak_scale: Multiplier applied to the length-compressed peak width (default 4).
    """

    size: float = Field(10.0, gt=0.0, description="Spacing between samples")
    amplitude: float = Field(5.0, ge=0.0, description="Sideways wave displacement")
    frequency: float = Field(0.01, ge=0.0, description="Wave cycles per unit")
    wisp_every: int = Field(3, ge=0, description="Jitter every Nth sample")
    wisp_amount: float = Field(2.0, ge=0.0, description="Maximum jitter per axis")
    peak_scale: float = Field(4.0, ge=0.0, description="Peak width multiplier")


class AnimationParams(BaseModel):
    """Configuration for the per-point width animation.

    Attributes:
        grow_duration: Seconds to go from zero to peak width (default 0.35).
        fade_duration: Seconds to go from peak width back to zero (default 0.35).
        stagger: Delay spread across a stroke's points in seconds (default 0.35).
        ease: Easing name, one of "linear", "ease_in_out", "ease_out".
    """

    grow_duration: float = Field(0.35, gt=0.0, description="Grow phase in seconds")
    fade_duration: float = Field(0.35, gt=0.0, description="Fade phase in seconds")
    stagger: float = Field(0.35, ge=0.0, description="Delay spread in seconds")
    ease: str = Field("linear", description="Easing function name")


class OutlineParams(BaseModel):
    """Configuration for the variable-width outline and its path data.

    Attributes:
        size: Base stroke diameter (default 2).
        thinning: How strongly weight affects width, -1 to 1 (default 1).
        smoothing: Outline point spacing relative to size (default 0).
        streamline: Input smoothing, 0 keeps samples exact (default 0).
        simulate_pressure: Derive pressure from point spacing (default False).
        cap_start: Round cap at the first sample (default True).
        cap_end: Round cap at the last sample (default True).
        taper_start: Taper distance at the start, 0 disables (default 0).
        taper_end: Taper distance at the end, 0 disables (default 0).
        closed: Close the emitted path (default True).
        precision: Decimal places in emitted coordinates (default 2).
    """

    size: float = Field(2.0, gt=0.0, description="Base stroke diameter")
    thinning: float = Field(1.0, ge=-1.0, le=1.0, description="Weight influence")
    smoothing: float = Field(0.0, ge=0.0, le=1.0, description="Outline smoothing")
    streamline: float = Field(0.0, ge=0.0, le=1.0, description="Input smoothing")
    simulate_pressure: bool = Field(False, description="Simulate pressure")
    cap_start: bool = Field(True, description="Round cap at start")
    cap_end: bool = Field(True, description="Round cap at end")
    taper_start: float = Field(0.0, ge=0.0, description="Start taper distance")
    taper_end: float = Field(0.0, ge=0.0, description="End taper distance")
    closed: bool = Field(True, description="Close the emitted path")
    precision: int = Field(2, ge=0, le=8, description="Coordinate decimal places")


class RenderParams(BaseModel):
    """Configuration for the frame clock and the host's scene.

    The crinkle values are passed through to the host, which applies its
    own turbulence distortion seeded by the frame tick.

    Attributes:
        fps: Frame clock rate (default 10, deliberately jittery).
        background: Canvas background color.
        palette: Stroke colors.
        color_policy: "random" or "cycle" through the palette.
        crinkle_frequency: Turbulence base frequency for the host filter.
        crinkle_amplitude: Displacement scale for the host filter.
    """

    fps: int = Field(10, ge=1, le=240, description="Frames per second")
    background: str = Field("hsl(236, 47%, 35%)", description="Background color")
    palette: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PALETTE),
        min_length=1,
        description="Stroke colors",
    )
    color_policy: ColorPolicy = Field(
        ColorPolicy.RANDOM, description="Color selection policy"
    )
    crinkle_frequency: float = Field(0.1, ge=0.0, description="Turbulence frequency")
    crinkle_amplitude: float = Field(5.0, ge=0.0, description="Displacement scale")


class PaintParameters(BaseModel):
    """Complete configuration for a paint trail session.

    Aggregates all parameter sets for every stage, providing a single
    object that can be passed to a session. Each component uses sensible
    defaults but can be customized as needed.

    Attributes:
        variant: Stroke generator to use ("fan" or "wave").
        history_length: Pointer samples kept for from/to selection (default 20).
        generate_interval: Seconds between generated strokes (default 0.02).
        seed: Seed for the session's random generator, None for entropy.
        fan: Fan/curl generator parameters.
        wave: Wave generator parameters.
        animation: Width animation parameters.
        outline: Outline and path data parameters.
        render: Frame clock and scene parameters.
    """

    variant: StrokeVariant = Field(StrokeVariant.FAN, description="Stroke variant")
    history_length: int = Field(20, ge=2, description="Pointer history length")
    generate_interval: float = Field(
        0.02, gt=0.0, description="Seconds between generated strokes"
    )
    seed: int | None = Field(None, description="Random seed")
    fan: FanParams = Field(default_factory=FanParams, description="Fan parameters")
    wave: WaveParams = Field(default_factory=WaveParams, description="Wave parameters")
    animation: AnimationParams = Field(
        default_factory=AnimationParams, description="Animation parameters"
    )
    outline: OutlineParams = Field(
        default_factory=OutlineParams, description="Outline parameters"
    )
    render: RenderParams = Field(
        default_factory=RenderParams, description="Render parameters"
    )
