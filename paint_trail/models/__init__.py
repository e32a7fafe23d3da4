"""Domain models for the paint trail library.

This module provides a centralized location for all data models used
throughout the library. It includes:

- Core domain models (Vector, SamplePoint, Paint)
- Rendered output (RenderedPaint, Frame)
- Configuration parameters for each stage

All models are built using Pydantic for data validation and serialization,
ensuring type safety and clear interfaces between components.
"""

# Re-export core models
from paint_trail.models.core_models import (
    TAU,
    AngleUnit,
    Vector,
    SamplePoint,
    Paint,
    new_paint_id,
)

# Re-export pipeline models
from paint_trail.models.pipeline_models import GeneratedStroke, RenderedPaint, Frame

# Re-export setting models
from paint_trail.models.settings_models import (
    DEFAULT_PALETTE,
    StrokeVariant,
    ColorPolicy,
    FanParams,
    WaveParams,
    AnimationParams,
    OutlineParams,
    RenderParams,
    PaintParameters,
)
