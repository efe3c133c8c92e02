"""RGBA color value with validated channels."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace

from shapegen._validation import require_float, require_int
from shapegen.config import ColorRange, hundredths

# Transparency scale of the rasterizer: 0 = opaque, 127 = fully transparent
RASTER_ALPHA_MAX = 127


@dataclass(frozen=True)
class Color:
    """An RGBA color.

    ``red``, ``green`` and ``blue`` are integers in [0, 255]. ``alpha`` is the
    opacity in [0.0, 1.0], 0.0 being fully transparent and 1.0 fully opaque.

    Instances are immutable; the ``with_*`` methods return a validated copy.
    """

    red: int
    green: int
    blue: int
    alpha: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", require_int(self.red, 0, 255, "red component value"))
        object.__setattr__(self, "green", require_int(self.green, 0, 255, "green component value"))
        object.__setattr__(self, "blue", require_int(self.blue, 0, 255, "blue component value"))
        object.__setattr__(self, "alpha", require_float(self.alpha, 0.0, 1.0, "alpha value"))

    @classmethod
    def create(cls, red: int, green: int, blue: int, alpha: float) -> Color:
        return cls(red, green, blue, alpha)

    def with_red(self, red: int) -> Color:
        return replace(self, red=red)

    def with_green(self, green: int) -> Color:
        return replace(self, green=green)

    def with_blue(self, blue: int) -> Color:
        return replace(self, blue=blue)

    def with_alpha(self, alpha: float) -> Color:
        return replace(self, alpha=alpha)

    def as_rgba(self) -> tuple[int, int, int, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_raster_alpha(self) -> int:
        """Return the alpha on the rasterizer's 0 (opaque) .. 127 (transparent) scale.

        The fractional part is truncated, so 0.5 maps to 63.
        """
        return int(RASTER_ALPHA_MAX - self.alpha * RASTER_ALPHA_MAX)

    @classmethod
    def random(
        cls,
        options: ColorRange | None = None,
        rng: random.Random | None = None,
    ) -> Color:
        """Return a color sampled uniformly from *options*.

        Channels are drawn independently. Alpha is drawn as a whole number of
        hundredths between the quantized bounds, e.g. the default 0.6-0.8
        range yields one of 0.60, 0.61, ..., 0.80.
        """
        opts = options if options is not None else ColorRange()
        r = rng if rng is not None else random
        return cls(
            r.randint(opts.min_red, opts.max_red),
            r.randint(opts.min_green, opts.max_green),
            r.randint(opts.min_blue, opts.max_blue),
            r.randint(hundredths(opts.min_alpha), hundredths(opts.max_alpha)) / 100,
        )
