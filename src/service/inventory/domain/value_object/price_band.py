import attrs


@attrs.define(frozen=True)
class PriceBand:
    """Pre-tier listing price range; tier multipliers apply on top"""

    min_price: float
    max_price: float

    def __attrs_post_init__(self) -> None:
        if self.min_price <= 0:
            raise ValueError('PriceBand min_price must be positive')
        if self.max_price < self.min_price:
            raise ValueError('PriceBand max_price must be >= min_price')

    def with_min_spread(self, spread: float) -> 'PriceBand':
        """Widen max so the band spans at least `spread` (relative) above min"""
        return PriceBand(self.min_price, max(self.max_price, self.min_price * (1 + spread)))

    def scaled(self, factor: float) -> 'PriceBand':
        return PriceBand(self.min_price * factor, self.max_price * factor)
