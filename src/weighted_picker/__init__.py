"""Public package interface for weighted_picker."""

from .config import PickerConfig
from .distribution import DistributionTable
from .errors import (
    CountMismatchError,
    IllegalCallOrderError,
    InvalidArgumentError,
    InvalidCountError,
    InvalidPriorityError,
    MixedPriorityKindError,
    NotEnoughValuesError,
    PercentageOverflowError,
    PickerError,
    SamplingExhaustedError,
)
from .picker import BuilderState, RandomPicker, out_of
from .priorities import PriorityModel
from .random_source import DefaultRandomSource
from .sampler import Sampler
from .types import DrawMode, Entry, PriorityKind, RandomNumberGenerator

__all__ = [
    "BuilderState",
    "CountMismatchError",
    "DefaultRandomSource",
    "DistributionTable",
    "DrawMode",
    "Entry",
    "IllegalCallOrderError",
    "InvalidArgumentError",
    "InvalidCountError",
    "InvalidPriorityError",
    "MixedPriorityKindError",
    "NotEnoughValuesError",
    "PercentageOverflowError",
    "PickerConfig",
    "PickerError",
    "PriorityKind",
    "PriorityModel",
    "RandomNumberGenerator",
    "RandomPicker",
    "SamplingExhaustedError",
    "Sampler",
    "out_of",
]
