"""
Marketing tools: campaigns, markets, channels, discovery, price rules,
analytics, pixels and publications
"""
