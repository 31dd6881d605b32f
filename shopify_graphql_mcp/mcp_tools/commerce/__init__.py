"""
Extended commerce tools: gift cards, returns, checkouts, payments, B2B,
store credit, subscriptions and checkout/delivery functions
"""
