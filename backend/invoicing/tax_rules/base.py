"""Abstract base class for tax policies."""
from abc import ABC, abstractmethod
from decimal import Decimal
from invoicing.models.item import Item


class TaxPolicy(ABC):
    """Abstract base class for per-item tax policies."""
    
    @abstractmethod
    def compute(self, item: Item) -> Decimal:
        """
        Calculate the tax owed for a single item.
        
        Args:
            item: The item being taxed
            
        Returns:
            Tax amount, never negative for a non-negative price
        """
        pass
    
    @abstractmethod
    def get_rate(self) -> Decimal:
        """Get the rate as a percentage (e.g. 19 for 19%)."""
        pass


class PercentageTaxPolicy(TaxPolicy):
    """Flat percentage of the item price."""
    
    def __init__(self, rate):
        rate = Decimal(str(rate))
        if rate < 0:
            raise ValueError(f"Tax rate must not be negative: {rate}")
        self.rate = rate
    
    def compute(self, item: Item) -> Decimal:
        """Return price * rate / 100."""
        return item.price * self.rate / Decimal("100")
    
    def get_rate(self) -> Decimal:
        return self.rate
    
    def __eq__(self, other) -> bool:
        return isinstance(other, PercentageTaxPolicy) and other.rate == self.rate
    
    def __hash__(self) -> int:
        return hash(self.rate)
    
    def __repr__(self) -> str:
        return f"PercentageTaxPolicy(rate={self.rate})"
