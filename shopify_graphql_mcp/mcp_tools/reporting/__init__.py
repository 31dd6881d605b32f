"""
Reporting tools: reports, resource feedback and apps
"""
