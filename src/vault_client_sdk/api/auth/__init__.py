"""
Auth method login endpoints.
"""
