"""
Automation tools: inventory shipments, inventory transfers and packing slips
"""
