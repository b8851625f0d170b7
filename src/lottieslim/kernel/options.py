"""Optimization options: which passes run and at what precision."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_PRECISION = 0
MAX_PRECISION = 4


class OptimizationOptions(BaseModel):
    """Per-run pass selection.

    The defaults enable every lossless pass at two decimals of precision
    and leave the lossy (aggressive) passes off.
    """
    remove_hidden_layers: bool = True
    round_decimals: bool = True
    decimal_precision: int = Field(2, description="Decimals kept by round_decimals (0-4)")
    remove_metadata: bool = True
    remove_empty_groups: bool = True
    simplify_keyframes: bool = True
    remove_default_values: bool = True

    # Aggressive (visually lossy) passes
    remove_expressions: bool = False
    remove_effects: bool = False
    collapse_transforms: bool = False
    collapse_duplicate_keyframes: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('decimal_precision')
    @classmethod
    def validate_precision(cls, v: int) -> int:
        """Validate precision is within the supported range."""
        if not MIN_PRECISION <= v <= MAX_PRECISION:
            raise ValueError(
                f"decimal_precision must be between {MIN_PRECISION} and {MAX_PRECISION}, got {v}"
            )
        return v

    @classmethod
    def aggressive(cls, **overrides) -> "OptimizationOptions":
        """Options with every pass enabled, lossy ones included."""
        values = dict(
            remove_expressions=True,
            remove_effects=True,
            collapse_transforms=True,
            collapse_duplicate_keyframes=True,
        )
        values.update(overrides)
        return cls(**values)
