"""
Tool category configuration.

Tools are grouped into modules and modules into categories. Categories are
switched on and off from the environment:

    ENABLE_ESSENTIAL=true            # boolean flags, one per category
    ENABLE_MARKETING=false

    ENABLED_TOOL_CATEGORIES=essential,commerce   # legacy list
    ENABLED_TOOL_CATEGORIES=all
    ENABLED_TOOL_CATEGORIES=none

When any ENABLE_<CATEGORY> flag is present only the flags are consulted.
"""
import os
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "shopify_graphql_mcp.mcp_tools"


@dataclass(frozen=True)
class CategoryConfig:
    name: str
    description: str
    modules: List[str] = field(default_factory=list)


ESSENTIAL = CategoryConfig(
    name='essential',
    description='Core e-commerce operations: products, orders, customers, inventory, collections',
    modules=[
        'shop',
        'products',
        'orders',
        'customers',
        'collections',
        'inventory',
        'locations',
        'draft-orders',
        'discounts',
        'fulfillments',
    ],
)

COMMERCE = CategoryConfig(
    name='commerce',
    description='Extended commerce: gift cards, returns, checkouts, payments, store credit, subscriptions',
    modules=[
        'gift-cards',
        'returns',
        'checkouts',
        'payment-terms',
        'payment-customizations',
        'shopify-payments',
        'order-edits',
        'companies',
        'cash-tracking',
        'store-credit',
        'subscriptions',
        'fulfillment-constraints',
        'delivery-customizations',
        'delivery-option-generators',
        'custom-fulfillment-services',
    ],
)

MARKETING = CategoryConfig(
    name='marketing',
    description='Marketing: campaigns, markets, channels, discovery, price rules',
    modules=[
        'marketing-campaigns',
        'markets',
        'channels',
        'discovery',
        'price-rules',
        'analytics',
        'pixels',
        'publications',
    ],
)

CONTENT = CategoryConfig(
    name='content',
    description='Content: pages, navigation, themes, files, metaobjects, translations',
    modules=[
        'pages',
        'navigation',
        'themes',
        'files',
        'metaobjects',
        'translations',
        'locales',
        'legal-policies',
    ],
)

ADVANCED = CategoryConfig(
    name='advanced',
    description='Advanced: cart transforms, validations, audit events, custom pixels, scripts',
    modules=[
        'cart-transforms',
        'validations',
        'audit-events',
        'custom-pixels',
        'script-tags',
        'customer-data-erasure',
        'customer-merge',
        'customer-payment-methods',
        'privacy-settings',
        'shipping',
        'product-listings',
    ],
)

REPORTING = CategoryConfig(
    name='reporting',
    description='Reporting: reports, resource feedbacks, apps',
    modules=[
        'reports',
        'resource-feedbacks',
        'apps',
    ],
)

AUTOMATION = CategoryConfig(
    name='automation',
    description='Automation: inventory shipments, transfers, packing slips',
    modules=[
        'inventory-shipments',
        'inventory-transfers',
        'packing-slip-templates',
    ],
)

ALL_CATEGORIES = [
    ESSENTIAL,
    COMMERCE,
    MARKETING,
    CONTENT,
    ADVANCED,
    REPORTING,
    AUTOMATION,
]

CATEGORY_NAMES = [c.name for c in ALL_CATEGORIES]


def _flag_name(category: str) -> str:
    return f"ENABLE_{category.upper()}"


def get_enabled_categories(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Resolve the enabled categories from the environment.

    Boolean ENABLE_<CATEGORY> flags take precedence; without them the
    comma separated ENABLED_TOOL_CATEGORIES list is used, defaulting to all.
    """
    env = os.environ if env is None else env

    flags = {c: env.get(_flag_name(c)) for c in CATEGORY_NAMES}
    if any(value is not None for value in flags.values()):
        return [c for c, value in flags.items()
                if value is not None and value.strip().lower() == 'true']

    value = (env.get('ENABLED_TOOL_CATEGORIES') or '').strip().lower()
    if not value or value == 'all':
        return list(CATEGORY_NAMES)
    if value == 'none':
        return []

    requested = [s.strip() for s in value.split(',') if s.strip()]
    invalid = [r for r in requested if r not in CATEGORY_NAMES]
    if invalid:
        logger.warning(f"Invalid tool categories: {', '.join(invalid)}")
        logger.warning(f"Valid categories: {', '.join(CATEGORY_NAMES)}")

    enabled = []
    for r in requested:
        if r in CATEGORY_NAMES and r not in enabled:
            enabled.append(r)
    return enabled


def get_category_config(name: str) -> Optional[CategoryConfig]:
    """Get category configuration by name."""
    for category in ALL_CATEGORIES:
        if category.name == name:
            return category
    return None


def module_path(category: str, module: str) -> str:
    """Import path of a tool module, e.g. essential/draft-orders -> ...essential.draft_orders"""
    return f"{TOOLS_PACKAGE}.{category}.{module.replace('-', '_')}"


def get_enabled_tool_count(enabled_categories: List[str]) -> int:
    """Total number of tools the given categories register."""
    if not enabled_categories:
        return 0

    # Imported here; the tool package imports this module.
    from .mcp_tools import load_tool_classes

    total = 0
    for name in enabled_categories:
        category = get_category_config(name)
        if category is None:
            continue
        for module in category.modules:
            total += len(load_tool_classes(category.name, module))
    return total


def describe_categories(enabled_categories: List[str]) -> Dict[str, dict]:
    """Summary of every category, used by the categories resource and the CLI."""
    return {
        c.name: {
            "description": c.description,
            "modules": list(c.modules),
            "enabled": c.name in enabled_categories,
        }
        for c in ALL_CATEGORIES
    }
