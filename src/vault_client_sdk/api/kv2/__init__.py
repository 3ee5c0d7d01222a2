"""
KV v2 secrets engine endpoints.
"""
