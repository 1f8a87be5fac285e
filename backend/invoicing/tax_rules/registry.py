"""Tax policy registry."""
import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional
from invoicing.models.item import Category
from invoicing.tax_rules.base import PercentageTaxPolicy, TaxPolicy
from invoicing.tax_rules.rules import STANDARD_TAX_RATES
from invoicing.utils.errors import InvalidReferenceError, MissingTaxRuleError

logger = logging.getLogger(__name__)


class TaxPolicyRegistry:
    """
    Read-only mapping from product category to tax policy.
    
    The registry may be incomplete; a missing category only becomes an
    error when an invoice computes its tax.
    """
    
    def __init__(self, policies: Optional[Mapping[Category, TaxPolicy]] = None):
        entries: Dict[Category, TaxPolicy] = {}
        for category, policy in (policies or {}).items():
            if not isinstance(category, Category):
                raise InvalidReferenceError(f"Registry keys must be categories, got {category!r}")
            if not isinstance(policy, TaxPolicy):
                raise InvalidReferenceError(f"Policy for '{category.value}' is not a TaxPolicy: {policy!r}")
            entries[category] = policy
        self._policies = MappingProxyType(entries)
    
    def lookup(self, category: Category) -> Optional[TaxPolicy]:
        """Return the policy registered for exactly this category, or None."""
        return self._policies.get(category)
    
    def get_policy(self, category: Category) -> TaxPolicy:
        """
        Get the policy for a category.
        
        Raises:
            MissingTaxRuleError: If no policy is registered for the category
        """
        policy = self._policies.get(category)
        if policy is None:
            raise MissingTaxRuleError(category)
        return policy
    
    def with_policy(self, category: Category, policy: TaxPolicy) -> "TaxPolicyRegistry":
        """Return a new registry with one entry added or replaced."""
        entries = dict(self._policies)
        entries[category] = policy
        return TaxPolicyRegistry(entries)
    
    def categories(self) -> List[Category]:
        return list(self._policies.keys())
    
    def __contains__(self, category) -> bool:
        return category in self._policies
    
    def __len__(self) -> int:
        return len(self._policies)
    
    def __iter__(self) -> Iterator[Category]:
        return iter(self._policies)
    
    def __repr__(self) -> str:
        rates = ", ".join(f"{c.value}={p.get_rate()}%" for c, p in self._policies.items())
        return f"TaxPolicyRegistry({rates})"


def build_standard_registry() -> TaxPolicyRegistry:
    """Build the registry from the fixed standard rate table."""
    registry = TaxPolicyRegistry({
        category: PercentageTaxPolicy(rate)
        for category, rate in STANDARD_TAX_RATES.items()
    })
    logger.debug("Built standard tax registry: %r", registry)
    return registry


def list_supported_categories() -> list[dict]:
    """List all categories of the standard rate table."""
    return [
        {"code": category.name, "name": category.value, "rate": rate}
        for category, rate in STANDARD_TAX_RATES.items()
    ]
