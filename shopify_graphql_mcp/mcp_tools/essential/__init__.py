"""
Essential tools: shop, products, orders, customers, collections, inventory,
locations, draft orders, discounts and fulfillments
"""
