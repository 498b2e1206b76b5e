"""
Storefront Users Package

Credential store, signup and login.
"""
