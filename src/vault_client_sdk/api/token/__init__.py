"""
Token auth method endpoints.
"""
