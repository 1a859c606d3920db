"""
Household shared calendar backend.
"""
