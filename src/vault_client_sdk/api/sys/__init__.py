"""
System backend endpoints.
"""
