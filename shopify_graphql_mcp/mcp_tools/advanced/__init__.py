"""
Advanced tools: Shopify Functions, audit events, pixels, script tags,
customer privacy operations, shipping and product listings
"""
